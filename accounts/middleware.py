import structlog
from django.contrib.auth import login
from django.http import HttpResponse

from accounts.models import User

logger = structlog.get_logger()

USER_HEADER = "X-User-NAME"


# Stands in for the external auth provider: trust the X-User-NAME header
# on API paths and bind the username to every log line of the request.
class MockLoginUserMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        structlog.contextvars.clear_contextvars()
        if request.path.startswith("/api"):
            username = request.headers.get(USER_HEADER)
            if username:
                user = User.objects.filter(username=username, is_active=True).first()
                if user is None:
                    logger.info("mock_login_rejected", username=username)
                    return HttpResponse(
                        "User not found or invalid credentials.", status=401
                    )
                login(request, user)
                structlog.contextvars.bind_contextvars(username=username)
        try:
            return self.get_response(request)
        finally:
            structlog.contextvars.clear_contextvars()
