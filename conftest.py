from datetime import datetime, timezone

import pytest

T0 = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def learner(db, django_user_model):
    return django_user_model.objects.create_user(username="learner")


@pytest.fixture
def other_user(db, django_user_model):
    return django_user_model.objects.create_user(username="other")


@pytest.fixture
def flashcard_set(learner):
    from catalog.models import FlashcardSet

    return FlashcardSet.objects.create(owner=learner, title="Capitals")


@pytest.fixture
def cards(flashcard_set):
    from catalog.models import Flashcard

    return [
        Flashcard.objects.create(flashcard_set=flashcard_set, question=q, answer=a)
        for q, a in [("France", "Paris"), ("Japan", "Tokyo"), ("Peru", "Lima")]
    ]


@pytest.fixture
def card(cards):
    return cards[0]


@pytest.fixture
def private_set(other_user):
    from catalog.models import Flashcard, FlashcardSet

    s = FlashcardSet.objects.create(owner=other_user, title="Secret", visibility="private")
    Flashcard.objects.create(flashcard_set=s, question="q", answer="a")
    return s


@pytest.fixture
def api_client(learner):
    from rest_framework.test import APIClient

    client = APIClient()
    client.credentials(HTTP_X_USER_NAME=learner.username)
    return client
