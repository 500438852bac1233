from django.urls import include, path
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet, initialize_data

router = DefaultRouter()
router.register("users", UserViewSet, basename="user")

urlpatterns = [
    path("api/init-data", initialize_data, name="init-data"),
    path("api/", include("scheduler.api.urls")),
    path("api/", include(router.urls)),
]
