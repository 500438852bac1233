from django.utils import timezone
from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import QUALITY_LABELS
from ..services.due import select_due
from ..services.reviews import record_review
from ..utils.time import to_local_iso
from .serializers import DueCardSerializer, DueQuerySerializer, ReviewInSerializer

base_logger = structlog.get_logger()


def not_authenticated():
    return Response(
        {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
    )


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        if not request.user.is_authenticated:
            return not_authenticated()

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        user_id = request.user.pk
        card_id = s.validated_data["card_id"]
        quality = s.validated_data["quality"]
        idem = s.validated_data.get("idempotency_key") or None

        progress, was_idem = record_review(
            user_id, card_id, quality, timezone.now(), idempotency_key=idem
        )
        status_code = status.HTTP_200_OK if was_idem else status.HTTP_201_CREATED

        # Log with request_id & relevant context
        logger.info(
            "review_api_response",
            user_id=str(user_id),
            card_id=str(card_id),
            quality=quality,
            idempotent=was_idem,
            interval_days=progress.interval,
            next_review_utc=progress.next_review_date.isoformat(),
            next_review_local=to_local_iso(progress.next_review_date),
            status=status_code,
        )

        return Response(
            {
                "card_id": str(card_id),
                "quality": quality,
                "quality_label": QUALITY_LABELS[quality],
                "ease_factor": progress.ease_factor,
                "repetitions": progress.repetitions,
                "interval": progress.interval,
                "last_reviewed": progress.last_reviewed.isoformat(),
                "next_review_utc": progress.next_review_date.isoformat(),
                "next_review_local": to_local_iso(progress.next_review_date),
                "idempotent": was_idem,
            },
            status=status_code,
        )


class DueCardsView(views.APIView):
    def get(self, request, set_id=None):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        if not request.user.is_authenticated:
            return not_authenticated()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        now = qs.validated_data.get("now") or timezone.now()

        due = select_due(request.user.pk, set_id, now)
        cards = DueCardSerializer(
            [{"card": card, "progress": progress} for card, progress in due], many=True
        ).data

        logger.info(
            "due_cards_api_response",
            user_id=str(request.user.pk),
            set_id=str(set_id) if set_id else None,
            now_utc=now.isoformat(),
            now_local=to_local_iso(now),
            card_count=len(cards),
        )

        return Response(
            {
                "set_id": str(set_id) if set_id else None,
                "now_utc": now.isoformat(),
                "now_local": to_local_iso(now),
                "card_count": len(cards),
                "cards": cards,
            }
        )
