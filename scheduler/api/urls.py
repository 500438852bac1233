from django.urls import path
from .views import ReviewView, DueCardsView

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("due-cards", DueCardsView.as_view(), name="due-cards"),
    path("sets/<uuid:set_id>/due-cards", DueCardsView.as_view(), name="set-due-cards"),
]
