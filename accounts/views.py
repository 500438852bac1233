import structlog
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, action, permission_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

logger = structlog.get_logger()


@api_view(["POST"])
@permission_classes([IsAdminUser])
def initialize_data(request):
    file_name = request.data.get("file", "SEED_DATA.json")
    logger.info("initialize_data_requested", file=file_name)
    try:
        call_command("init_data", file=file_name)
    except CommandError as e:
        logger.error("initialize_data_failed", file=file_name, error=str(e))
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(
        {"message": f"Data initialized successfully from {file_name}"},
        status=status.HTTP_200_OK,
    )


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the id and username of the logged-in user.
        """
        if request.user.is_authenticated:
            return Response(
                {"id": request.user.pk, "username": request.user.username},
                status=status.HTTP_200_OK,
            )
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
