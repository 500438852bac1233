INITIAL_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
SUCCESS_THRESHOLD = 3        # quality >= 3 counts as a successful recall
FIRST_INTERVAL_DAYS = 1      # after the first success (and after any lapse)
SECOND_INTERVAL_DAYS = 6     # after the second consecutive success
MIN_QUALITY = 0
MAX_QUALITY = 5
MAX_WRITE_ATTEMPTS = 2       # initial attempt + one retry on write conflict
