"""
Error taxonomy shared by the engine, the progress store and the API layer.
"""


class SchedulerError(Exception):
    code = "scheduler_error"


class InvalidInput(SchedulerError):
    """Out-of-range quality, naive timestamp or a malformed progress record."""

    code = "invalid_input"


class NotFound(SchedulerError):
    """Card or set does not exist or is not accessible to the user."""

    code = "not_found"


class WriteConflict(SchedulerError):
    """Another writer updated the (user, card) progress first."""

    code = "write_conflict"


class StoreUnavailable(SchedulerError):
    code = "store_unavailable"
