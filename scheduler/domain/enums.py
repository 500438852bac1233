from enum import IntEnum

class Quality(IntEnum):
    AGAIN = 0
    HARD = 1
    GOOD = 2
    EASY = 3
    VERY_EASY = 4
    PERFECT = 5

# Labels are presentation only; lapse vs success is decided by SUCCESS_THRESHOLD.
QUALITY_LABELS = {
    Quality.AGAIN: "Again",
    Quality.HARD: "Hard",
    Quality.GOOD: "Good",
    Quality.EASY: "Easy",
    Quality.VERY_EASY: "Very Easy",
    Quality.PERFECT: "Perfect",
}
