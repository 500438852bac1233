from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..domain.errors import (
    InvalidInput,
    NotFound,
    SchedulerError,
    StoreUnavailable,
    WriteConflict,
)

logger = structlog.get_logger()

STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    WriteConflict: status.HTTP_409_CONFLICT,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def scheduler_exception_handler(exc, context):
    """Map scheduler errors onto HTTP responses; defer everything else to DRF."""
    if not isinstance(exc, SchedulerError):
        return exception_handler(exc, context)

    status_code = next(
        (code for error, code in STATUS_BY_ERROR.items() if isinstance(exc, error)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    logger.info("scheduler_error_response",
        error=exc.code,
        detail=str(exc),
        status=status_code,
        view=type(context.get("view")).__name__,
    )
    return Response({"error": exc.code, "detail": str(exc)}, status=status_code)
