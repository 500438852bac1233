from contextlib import contextmanager

import structlog
from django.db import IntegrityError, InterfaceError, OperationalError, transaction
from django.db.models import Exists, F, OuterRef

from catalog.models import Flashcard
from .models import ReviewLog, ReviewProgress
from ..domain.errors import StoreUnavailable, WriteConflict
from ..domain.logic import validate_progress
from ..domain.progress import Existing, New

logger = structlog.get_logger()


@contextmanager
def store_errors(operation):
    """Translate connectivity failures into StoreUnavailable."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        logger.error("progress_store_unavailable", operation=operation, error=str(exc))
        raise StoreUnavailable(f"progress store unavailable during {operation}") from exc


def _load(row):
    return validate_progress(row.to_progress())


def _is_due(row, now):
    return row.next_review_date is not None and row.next_review_date <= now


def get_progress(user_id, card_id):
    """
    Return Existing(progress, version) for a stored row, or New when the
    user has never reviewed the card.
    """
    with store_errors("get_progress"):
        row = ReviewProgress.objects.filter(user_id=user_id, card_id=card_id).first()
    if row is None:
        return New(user_id=user_id, card_id=card_id)
    return Existing(progress=_load(row), version=row.version)


def upsert_progress(user_id, card_id, progress, expected_version):
    """
    Insert (expected_version=None) or compare-and-swap update the row for
    (user, card). Raises WriteConflict when another writer got there first.
    """
    fields = {
        "ease_factor": progress.ease_factor,
        "repetitions": progress.repetitions,
        "interval": progress.interval,
        "last_reviewed": progress.last_reviewed,
        "next_review_date": progress.next_review_date,
    }
    with store_errors("upsert_progress"):
        if expected_version is None:
            try:
                with transaction.atomic():
                    row = ReviewProgress.objects.create(
                        user_id=user_id, card_id=card_id, version=1, **fields
                    )
            except IntegrityError as exc:
                raise WriteConflict(
                    f"progress for user={user_id} card={card_id} was created concurrently"
                ) from exc
            return row.to_progress()

        updated = (ReviewProgress.objects
                   .filter(user_id=user_id, card_id=card_id, version=expected_version)
                   .update(version=F("version") + 1, **fields))
        if updated == 0:
            raise WriteConflict(
                f"progress for user={user_id} card={card_id} changed since version {expected_version}"
            )
        return progress


def query_due(user_id, set_ids, now):
    """
    Cards of the given sets that are new to the user or whose next review
    is at or before `now`, as (card_id, Progress | None) in card order.
    """
    with store_errors("query_due"), transaction.atomic():
        mine = ReviewProgress.objects.filter(user_id=user_id, card_id=OuterRef("pk"))
        card_ids = list(
            Flashcard.objects
            .filter(flashcard_set_id__in=list(set_ids))
            .filter(~Exists(mine) | Exists(mine.filter(next_review_date__lte=now)))
            .order_by("created_at", "id")
            .values_list("id", flat=True)
        )
        rows = {
            row.card_id: row
            for row in ReviewProgress.objects.filter(user_id=user_id, card_id__in=card_ids)
        }
    # A review committed between the two reads can push a card past `now`
    return [
        (card_id, _load(rows[card_id]) if card_id in rows else None)
        for card_id in card_ids
        if card_id not in rows or _is_due(rows[card_id], now)
    ]


def get_existing_idempotent(user_id, card_id, idem_key):
    if not idem_key:
        return None
    with store_errors("get_existing_idempotent"):
        return ReviewLog.objects.filter(
            user_id=user_id, card_id=card_id, idempotency_key=idem_key
        ).first()


def persist_review(prior, progress, quality, idem_key=None):
    """
    Upsert the progress row and append the ReviewLog in one transaction.
    If a concurrent duplicate idempotency key slips in, return the stored one.
    """
    expected_version = prior.version if isinstance(prior, Existing) else None
    with store_errors("persist_review"):
        try:
            with transaction.atomic():
                saved = upsert_progress(
                    progress.user_id, progress.card_id, progress, expected_version
                )
                ReviewLog.objects.create(
                    user_id=progress.user_id,
                    card_id=progress.card_id,
                    quality=quality,
                    idempotency_key=idem_key or None,
                    reviewed_at=progress.last_reviewed,
                    ease_factor=progress.ease_factor,
                    repetitions=progress.repetitions,
                    interval=progress.interval,
                    next_review_date=progress.next_review_date,
                )
        except IntegrityError:
            existing = get_existing_idempotent(progress.user_id, progress.card_id, idem_key)
            if existing is None:
                raise
            return existing.to_progress(), True
    return saved, False
