import math
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real

from .errors import InvalidInput
from .progress import Existing, New, PriorProgress, Progress
from ..config import (
    FIRST_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    SECOND_INTERVAL_DAYS,
    SUCCESS_THRESHOLD,
)


def validate_quality(quality) -> int:
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidInput(f"quality must be an integer, got {quality!r}")
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidInput(
            f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )
    return int(quality)


def validate_progress(progress: Progress) -> Progress:
    """
    Reject stored records that break the progress invariants instead of
    guessing at a repair.
    """
    ease = progress.ease_factor
    if isinstance(ease, bool) or not isinstance(ease, Real) or math.isnan(ease):
        raise InvalidInput(f"ease_factor is not a number: {ease!r}")
    if ease < MIN_EASE_FACTOR:
        raise InvalidInput(f"ease_factor {ease} is below the floor {MIN_EASE_FACTOR}")
    for field in ("repetitions", "interval"):
        value = getattr(progress, field)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInput(f"{field} must be a non-negative integer, got {value!r}")
    if progress.repetitions >= 1 and progress.interval < 1:
        raise InvalidInput("interval must be at least 1 once repetitions >= 1")
    if (progress.last_reviewed is None) != (progress.next_review_date is None):
        raise InvalidInput("last_reviewed and next_review_date must be set together")
    return progress


def require_aware(now: datetime) -> datetime:
    if not isinstance(now, datetime) or now.tzinfo is None or now.utcoffset() is None:
        raise InvalidInput(f"now must be a timezone-aware datetime, got {now!r}")
    return now


def next_ease_factor(ease_factor: float, quality: int) -> float:
    miss = 5 - quality
    return max(MIN_EASE_FACTOR, ease_factor + (0.1 - miss * (0.08 + miss * 0.02)))


def round_half_up(value: float) -> int:
    """
    Round x.5 up. The product is first snapped to 9 decimal places so float
    drift in the ease factor (7.499999999999999) cannot turn a half into a
    round-down.
    """
    snapped = Decimal(repr(value)).quantize(Decimal("1e-9"))
    return int(snapped.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_next_progress(prior: PriorProgress, quality: int, now: datetime) -> Progress:
    quality = validate_quality(quality)
    now = require_aware(now)

    if isinstance(prior, Existing):
        current = validate_progress(prior.progress)
    elif isinstance(prior, New):
        current = prior.progress
    else:
        raise InvalidInput(f"unsupported prior progress: {prior!r}")

    ease = next_ease_factor(current.ease_factor, quality)

    if quality < SUCCESS_THRESHOLD:
        # Lapse keeps the lowered ease factor
        repetitions = 0
        interval = FIRST_INTERVAL_DAYS
    else:
        repetitions = current.repetitions + 1
        if repetitions == 1:
            interval = FIRST_INTERVAL_DAYS
        elif repetitions == 2:
            interval = SECOND_INTERVAL_DAYS
        else:
            # Grows by the updated ease, not the prior one
            interval = round_half_up(current.interval * ease)

    try:
        next_review_date = now + timedelta(days=interval)
    except OverflowError as exc:
        raise InvalidInput(f"interval of {interval} days is past the supported date range") from exc

    return Progress(
        user_id=current.user_id,
        card_id=current.card_id,
        ease_factor=ease,
        repetitions=repetitions,
        interval=interval,
        last_reviewed=now,
        next_review_date=next_review_date,
    )
