"""
Tests for the signed-in user's account (/users/me).

Covers profile retrieval with metrics, partial updates, password change,
account deletion with cascades and the metrics endpoint.
"""

import pytest

from test_fixtures import (
    API,
    DEFAULT_PASSWORD,
    assert_error,
    client,
    create_food,
    create_meal_plan,
    db_session,
    register_user,
)
from domain.models import MealPlan, UserFavorite, UserProgress


def test_get_profile_includes_metrics():
    """
    Sarah: female, 29 y, 165 cm, 68 kg, lightly active, weight loss.

    Verifies:
    - BMI 68 / 1.65^2 = 24.98 (normal)
    - BMR 10*68 + 6.25*165 - 5*29 - 161 = 1405.25
    - TDEE 1405.25 * 1.375 = 1932.22
    - target = TDEE - 500
    """
    headers, _ = register_user("sarah")
    r = client.get(f"{API}/users/me", headers=headers)

    assert r.status_code == 200, r.text
    metrics = r.json()["metrics"]
    assert metrics["bmi"] == pytest.approx(24.98)
    assert metrics["bmi_category"] == "normal"
    assert metrics["bmr"] == pytest.approx(1405.25)
    assert metrics["tdee"] == pytest.approx(1932.22)
    assert metrics["target_calories"] == pytest.approx(1432.22)


def test_metrics_endpoint_for_male_maintenance():
    headers, _ = register_user("omar")
    r = client.get(f"{API}/users/me/metrics", headers=headers)

    assert r.status_code == 200
    body = r.json()
    assert body["bmi"] == pytest.approx(26.23)
    assert body["bmi_category"] == "overweight"
    assert body["bmr"] == pytest.approx(1810.0)
    assert body["tdee"] == pytest.approx(2805.5)
    assert body["target_calories"] == pytest.approx(2805.5)


def test_patch_profile_updates_only_given_fields():
    headers, body = register_user("sarah")
    r = client.patch(
        f"{API}/users/me",
        json={"weight": 64, "goal": "maintenance", "food_preferences": ["Spicy", "spicy "]},
        headers=headers,
    )

    assert r.status_code == 200, r.text
    updated = r.json()
    assert updated["weight"] == 64
    assert updated["goal"] == "maintenance"
    assert updated["food_preferences"] == ["spicy"]
    assert updated["name"] == body["user"]["name"]
    assert updated["metrics"]["target_calories"] == pytest.approx(
        updated["metrics"]["tdee"]
    )


def test_patch_profile_null_for_required_field_is_ignored():
    headers, body = register_user("sarah")
    r = client.patch(
        f"{API}/users/me", json={"name": None, "target_weight": None}, headers=headers
    )
    assert r.status_code == 200, r.text
    assert r.json()["name"] == body["user"]["name"]
    assert r.json()["target_weight"] is None


def test_patch_profile_validation():
    headers, _ = register_user("sarah")
    assert_error(
        client.patch(f"{API}/users/me", json={"age": 5}, headers=headers),
        400,
        "VALIDATION_ERROR",
    )
    assert_error(
        client.patch(f"{API}/users/me", json={"email": "x@y.com"}, headers=headers),
        400,
        "VALIDATION_ERROR",
    )


def test_change_password_flow():
    headers, body = register_user("omar")
    email = body["user"]["email"]

    wrong = client.put(
        f"{API}/users/me/password",
        json={"current_password": "not-my-password", "new_password": "NewPassw0rd!"},
        headers=headers,
    )
    assert_error(wrong, 401, "INVALID_CREDENTIALS")

    ok = client.put(
        f"{API}/users/me/password",
        json={"current_password": DEFAULT_PASSWORD, "new_password": "NewPassw0rd!"},
        headers=headers,
    )
    assert ok.status_code == 200, ok.text

    old_login = client.post(
        f"{API}/auth/login", json={"email": email, "password": DEFAULT_PASSWORD}
    )
    assert_error(old_login, 401)
    new_login = client.post(
        f"{API}/auth/login", json={"email": email, "password": "NewPassw0rd!"}
    )
    assert new_login.status_code == 200


def test_delete_account_cascades(db_session):
    """Deleting the account removes plans, progress and favorites, then the token stops working"""
    headers, body = register_user("sarah")
    food = create_food(headers, "dates")
    create_meal_plan(headers)
    client.post(f"{API}/progress", json={"weight": 67.5}, headers=headers)
    client.post(f"{API}/favorites/{food['id']}", headers=headers)

    r = client.delete(f"{API}/users/me", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "deleted": body["user"]["id"]}

    assert db_session.query(MealPlan).count() == 0
    assert db_session.query(UserProgress).count() == 0
    assert db_session.query(UserFavorite).count() == 0

    assert_error(client.get(f"{API}/users/me", headers=headers), 401, "USER_NOT_FOUND")


def test_users_endpoints_require_auth():
    for method, path in [
        ("get", "/users/me"),
        ("patch", "/users/me"),
        ("delete", "/users/me"),
        ("get", "/users/me/metrics"),
    ]:
        r = client.request(
            method.upper(), f"{API}{path}", json={} if method == "patch" else None
        )
        assert_error(r, 401)


def test_patch_profile_name_is_trimmed_before_length_check():
    headers, _ = register_user("sarah")
    assert_error(
        client.patch(f"{API}/users/me", json={"name": " b "}, headers=headers),
        400,
        "VALIDATION_ERROR",
    )
    r = client.patch(f"{API}/users/me", json={"name": "  Sara  "}, headers=headers)
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Sara"
