import os
import pytest
import requests
import uuid
import logging
from datetime import datetime, timedelta, timezone

BASE_URL = os.environ.get("STUDY_BASE_URL", "http://127.0.0.1:8000")
logger = logging.getLogger(__name__)

# Matches accounts/management/commands/SEED_DATA.json
PUBLIC_SET = "7d1c2f3a-5b8e-4c61-9a0f-1e2d3c4b5a61"
PUBLIC_CARDS = [f"0b6f4a2e-1c3d-4e5f-8a9b-0c1d2e3f4a0{i}" for i in range(1, 5)]
PRIVATE_SET = "9e8d7c6b-5a49-4382-9170-fedcba987654"


# Needs a prior `manage.py init_data` on the server so the seeded superuser exists
@pytest.fixture(autouse=True)
def seeded():
    r = requests.post(
        f"{BASE_URL}/api/init-data", json={}, headers={"X-User-NAME": "testuser"}
    )
    assert r.status_code == 200, r.text


def post_review(username, card_id, quality, idem=None):
    """Helper for POST /api/reviews"""
    payload = {"card_id": str(card_id), "quality": quality}
    if idem:
        payload["idempotency_key"] = idem
    r = requests.post(
        f"{BASE_URL}/api/reviews", json=payload, headers={"X-User-NAME": username}
    )
    data = r.json()
    logger.info(
        "POST /api/reviews quality=%s (%s) → status=%s interval=%s idempotent=%s",
        quality,
        data.get("quality_label"),
        r.status_code,
        data.get("interval"),
        data.get("idempotent"),
    )
    return r


def get_due(username, set_id, now=None):
    """Helper for GET /api/sets/{id}/due-cards"""
    params = {"now": now.isoformat()} if now else {}
    r = requests.get(
        f"{BASE_URL}/api/sets/{set_id}/due-cards",
        params=params,
        headers={"X-User-NAME": username},
    )
    logger.info(
        "GET /due-cards now=%s → status=%s card_count=%s",
        now.isoformat() if now else None,
        r.status_code,
        r.json().get("card_count"),
    )
    return r


@pytest.mark.integration
def test_first_review_live():
    r = post_review("testuser1", PUBLIC_CARDS[0], 5)
    d = r.json()
    assert r.status_code == 201
    assert d["interval"] == 1
    assert d["quality_label"] == "Perfect"
    logger.info("✓ Passed: quality=5 scheduled in 1 day")


@pytest.mark.integration
def test_interval_growth_live():
    intervals = [post_review("testuser3", PUBLIC_CARDS[1], 4).json()["interval"] for _ in range(3)]
    assert intervals == [1, 6, 15]
    logger.info("✓ Passed: growth %s", intervals)


@pytest.mark.integration
def test_idempotency_live():
    key = f"idem-live-{uuid.uuid4()}"
    first = post_review("testuser1", PUBLIC_CARDS[2], 5, key)
    second = post_review("testuser1", PUBLIC_CARDS[2], 5, key)

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["idempotent"] is True
    assert first.json()["next_review_utc"] == second.json()["next_review_utc"]
    logger.info("✓ Passed: idempotency verified (201 then 200)")


@pytest.mark.integration
def test_due_cards_live():
    post_review("testuser4", PUBLIC_CARDS[0], 5)

    now = datetime.now(timezone.utc) + timedelta(minutes=1)
    due_ids = {c["id"] for c in get_due("testuser4", PUBLIC_SET, now).json()["cards"]}
    assert PUBLIC_CARDS[0] not in due_ids
    assert set(PUBLIC_CARDS[1:]) <= due_ids

    later = now + timedelta(days=2)
    due_ids = {c["id"] for c in get_due("testuser4", PUBLIC_SET, later).json()["cards"]}
    assert set(PUBLIC_CARDS) <= due_ids
    logger.info("✓ Passed: due-cards includes/excludes correctly")


@pytest.mark.integration
def test_private_set_hidden_live():
    r = get_due("testuser1", PRIVATE_SET)
    assert r.status_code == 404
    assert get_due("testuser2", PRIVATE_SET).status_code == 200
