import structlog

from catalog.repos import accessible_set_ids, cards_by_id, get_accessible_set
from ..data.repos import query_due
from ..domain.errors import NotFound
from ..domain.logic import require_aware

logger = structlog.get_logger()


def select_due(user_id, set_id, now):
    """
    Cards the user should study at `now`: never-reviewed cards plus cards
    whose next review date has passed. With set_id=None every set the user
    can access is considered. Returns [(Flashcard, Progress | None), ...].
    """
    now = require_aware(now)
    if set_id is None:
        set_ids = accessible_set_ids(user_id)
    else:
        if get_accessible_set(user_id, set_id) is None:
            raise NotFound(f"flashcard set {set_id} not found")
        set_ids = [set_id]

    due = query_due(user_id, set_ids, now)
    cards = cards_by_id(card_id for card_id, _ in due)

    logger.info("due_cards_selected",
        user_id=str(user_id),
        set_id=str(set_id) if set_id else None,
        now_utc=now.isoformat(),
        card_count=len(due),
        new_count=sum(1 for _, progress in due if progress is None),
    )
    return [(cards[card_id], progress) for card_id, progress in due]
