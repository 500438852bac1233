from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Learner account. Owns flashcard sets and review progress; deleting a user
    cascades to both.
    """

    pass
