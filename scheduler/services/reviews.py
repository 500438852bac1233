import structlog

from catalog.repos import get_accessible_card
from ..config import MAX_WRITE_ATTEMPTS
from ..data.repos import get_existing_idempotent, get_progress, persist_review
from ..domain.errors import NotFound, WriteConflict
from ..domain.logic import compute_next_progress, validate_quality
from ..utils.time import to_local_iso

logger = structlog.get_logger()

def record_review(user_id, card_id, quality: int, now, idempotency_key=None):
    logger.info("review_received",
        user_id=str(user_id),
        card_id=str(card_id),
        quality=quality,
        idempotency_key=idempotency_key,
    )
    quality = validate_quality(quality)

    if get_accessible_card(user_id, card_id) is None:
        logger.info("review_card_not_found", user_id=str(user_id), card_id=str(card_id))
        raise NotFound(f"card {card_id} not found")

    # Fast path: return previous result if same idempotency_key
    existing = get_existing_idempotent(user_id, card_id, idempotency_key)
    if existing:
        logger.info("idempotent_reuse",
            user_id=str(user_id),
            card_id=str(card_id),
            next_review_utc=existing.next_review_date.isoformat(),
            next_review_local=to_local_iso(existing.next_review_date),
        )
        return existing.to_progress(), True

    for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
        prior = get_progress(user_id, card_id)
        progress = compute_next_progress(prior, quality, now)
        try:
            saved, was_idempotent = persist_review(prior, progress, quality, idempotency_key)
            break
        except WriteConflict:
            if attempt == MAX_WRITE_ATTEMPTS:
                logger.warning("review_write_conflict",
                    user_id=str(user_id), card_id=str(card_id), attempts=attempt)
                raise
            logger.info("review_write_conflict_retry",
                user_id=str(user_id), card_id=str(card_id), attempt=attempt)

    logger.info("review_scheduled",
        user_id=str(user_id),
        card_id=str(card_id),
        ease_factor=saved.ease_factor,
        repetitions=saved.repetitions,
        interval_days=saved.interval,
        idempotent=was_idempotent,
        next_review_utc=saved.next_review_date.isoformat(),
        next_review_local=to_local_iso(saved.next_review_date),
    )

    return saved, was_idempotent
