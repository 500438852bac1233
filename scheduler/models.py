from .data.models import ReviewLog, ReviewProgress  # noqa: F401
