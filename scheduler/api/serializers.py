from rest_framework import serializers

from ..config import MAX_QUALITY, MIN_QUALITY

class ReviewInSerializer(serializers.Serializer):
    card_id = serializers.UUIDField()
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY)
    idempotency_key = serializers.CharField(max_length=64, required=False, allow_blank=True)

class DueQuerySerializer(serializers.Serializer):
    now = serializers.DateTimeField(required=False)  # ISO-8601, defaults to server time

class ProgressSerializer(serializers.Serializer):
    ease_factor = serializers.FloatField()
    repetitions = serializers.IntegerField()
    interval = serializers.IntegerField()
    last_reviewed = serializers.DateTimeField()
    next_review_date = serializers.DateTimeField()

class DueCardSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="card.id")
    set_id = serializers.UUIDField(source="card.flashcard_set_id")
    question = serializers.CharField(source="card.question")
    answer = serializers.CharField(source="card.answer")
    created_at = serializers.DateTimeField(source="card.created_at")
    study_progress = ProgressSerializer(source="progress", allow_null=True)
