from django.conf import settings
from django.db import models

from ..config import INITIAL_EASE_FACTOR
from ..domain.progress import Progress


class ReviewProgress(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="review_progress"
    )
    card = models.ForeignKey(
        "catalog.Flashcard", on_delete=models.CASCADE, related_name="review_progress"
    )
    ease_factor = models.FloatField(default=INITIAL_EASE_FACTOR)
    repetitions = models.PositiveIntegerField(default=0)
    interval = models.PositiveIntegerField(default=0)  # days
    last_reviewed = models.DateTimeField(null=True, blank=True)
    next_review_date = models.DateTimeField(null=True, blank=True)  # UTC
    version = models.PositiveIntegerField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "card"], name="unique_progress_user_card"),
        ]
        indexes = [
            models.Index(fields=["user", "next_review_date"], name="progress_user_due_idx"),
        ]

    def to_progress(self):
        return Progress(
            user_id=self.user_id,
            card_id=self.card_id,
            ease_factor=self.ease_factor,
            repetitions=self.repetitions,
            interval=self.interval,
            last_reviewed=self.last_reviewed,
            next_review_date=self.next_review_date,
        )


class ReviewLog(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="review_logs"
    )
    card = models.ForeignKey(
        "catalog.Flashcard", on_delete=models.CASCADE, related_name="review_logs"
    )
    quality = models.SmallIntegerField()
    idempotency_key = models.CharField(max_length=64, null=True, blank=True)
    reviewed_at = models.DateTimeField()
    ease_factor = models.FloatField()
    repetitions = models.PositiveIntegerField()
    interval = models.PositiveIntegerField()
    next_review_date = models.DateTimeField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "card", "idempotency_key"], name="unique_review_idempotency"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "card", "reviewed_at"], name="reviewlog_user_card_idx"),
        ]

    def to_progress(self):
        return Progress(
            user_id=self.user_id,
            card_id=self.card_id,
            ease_factor=self.ease_factor,
            repetitions=self.repetitions,
            interval=self.interval,
            last_reviewed=self.reviewed_at,
            next_review_date=self.next_review_date,
        )
