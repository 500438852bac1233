from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from ..config import INITIAL_EASE_FACTOR


@dataclass(frozen=True)
class Progress:
    user_id: int
    card_id: object
    ease_factor: float
    repetitions: int
    interval: int
    last_reviewed: Optional[datetime] = None
    next_review_date: Optional[datetime] = None


@dataclass(frozen=True)
class New:
    """A card the user has never reviewed; no row exists in the store."""

    user_id: int
    card_id: object

    @property
    def progress(self) -> Progress:
        return Progress(
            user_id=self.user_id,
            card_id=self.card_id,
            ease_factor=INITIAL_EASE_FACTOR,
            repetitions=0,
            interval=0,
        )


@dataclass(frozen=True)
class Existing:
    """A stored progress row together with the version it was read at."""

    progress: Progress
    version: int


PriorProgress = Union[New, Existing]
