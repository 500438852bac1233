import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from accounts.models import User
from catalog.models import Flashcard, FlashcardSet
from scheduler.data.models import ReviewProgress
from scheduler.services.reviews import record_review


@pytest.mark.django_db
def test_init_data_loads_seed_file():
    call_command("init_data")

    assert User.objects.count() == 6
    assert User.objects.get(username="testuser").is_superuser
    assert User.objects.get(username="testuser1").check_password("testpassword")
    assert FlashcardSet.objects.count() == 2
    assert Flashcard.objects.count() == 6
    assert FlashcardSet.objects.get(owner__username="testuser2").visibility == "private"


@pytest.mark.django_db
def test_init_data_replaces_existing_progress(t0):
    call_command("init_data")
    user = User.objects.get(username="testuser1")
    card = Flashcard.objects.filter(flashcard_set__owner=user).first()
    record_review(user.pk, card.pk, 5, t0)

    call_command("init_data")

    assert not ReviewProgress.objects.exists()
    assert User.objects.count() == 6


@pytest.mark.django_db
def test_init_data_missing_file():
    with pytest.raises(CommandError):
        call_command("init_data", file="NO_SUCH_FILE.json")


@pytest.mark.django_db
def test_initialize_data_endpoint(django_user_model):
    django_user_model.objects.create_superuser("admin", password="pw")
    client = APIClient()
    client.credentials(HTTP_X_USER_NAME="admin")

    ok = client.post(reverse("init-data"), data={}, format="json")
    missing = client.post(reverse("init-data"), data={"file": "NO_SUCH_FILE.json"}, format="json")

    assert ok.status_code == status.HTTP_200_OK
    assert missing.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert "NO_SUCH_FILE.json" in missing.data["error"]


@pytest.mark.django_db
@pytest.mark.parametrize("headers", [{}, {"HTTP_X_USER_NAME": "testuser1"}])
def test_initialize_data_requires_staff(headers, t0):
    call_command("init_data")
    user = User.objects.get(username="testuser1")
    card = Flashcard.objects.filter(flashcard_set__owner=user).first()
    record_review(user.pk, card.pk, 5, t0)

    response = APIClient().post(reverse("init-data"), data={}, format="json", **headers)

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert ReviewProgress.objects.count() == 1
    assert User.objects.count() == 6


@pytest.mark.django_db
@pytest.mark.parametrize("file_name", ["/tmp/seed.json", "../commands/SEED_DATA.json", "sub/SEED_DATA.json", ".."])
def test_init_data_rejects_paths(file_name, django_user_model):
    django_user_model.objects.create_user("keeper")

    with pytest.raises(CommandError):
        call_command("init_data", file=file_name)

    assert django_user_model.objects.filter(username="keeper").exists()
