"""
Tests for weekly meal plans.

Meal Plan Flow
==============

1. POST /meal-plans                      -> 201, empty plan with zero totals
2. POST /meal-plans/{id}/foods           -> nutrition snapshot for the serving
3. GET  /meal-plans/{id}/days/{day}      -> meals grouped by type with day totals
4. POST /meal-plans/{id}/foods/{mf}/consume, DELETE to undo
5. DELETE /meal-plans/{id}/foods/{mf}    -> totals recomputed
"""

import uuid

import pytest

from test_fixtures import (
    API,
    assert_error,
    client,
    create_food,
    create_meal_plan,
    register_user,
)


def _add(headers, plan_id, food_id, meal_type="lunch", day=0, grams=100):
    return client.post(
        f"{API}/meal-plans/{plan_id}/foods",
        json={"food_id": food_id, "meal_type": meal_type, "day_of_week": day, "serving_size": grams},
        headers=headers,
    )


def test_create_and_list_plans_newest_week_first():
    headers, body = register_user("sarah")
    older = create_meal_plan(headers, "2025-01-06", "2025-01-12")
    newer = create_meal_plan(headers, "2025-01-13", "2025-01-19")

    assert older["user_id"] == body["user"]["id"]
    assert older["meal_count"] == 0
    assert older["totals"]["calories"] == 0
    assert older["meal_foods"] == []

    plans = client.get(f"{API}/meal-plans", headers=headers).json()
    assert [p["id"] for p in plans] == [newer["id"], older["id"]]


def test_create_plan_end_before_start_rejected():
    headers, _ = register_user("sarah")
    r = client.post(
        f"{API}/meal-plans",
        json={"week_start_date": "2025-01-12", "week_end_date": "2025-01-06"},
        headers=headers,
    )
    assert_error(r, 400, "VALIDATION_ERROR")


def test_update_plan_dates_checked_against_stored_values():
    headers, _ = register_user("sarah")
    plan = create_meal_plan(headers, "2025-01-06", "2025-01-12")

    bad = client.patch(
        f"{API}/meal-plans/{plan['id']}", json={"week_end_date": "2025-01-01"}, headers=headers
    )
    assert_error(bad, 400, "SERVICE_VALIDATION_ERROR")

    ok = client.patch(
        f"{API}/meal-plans/{plan['id']}", json={"week_end_date": "2025-01-13"}, headers=headers
    )
    assert ok.status_code == 200
    assert ok.json()["week_end_date"] == "2025-01-13"


def test_add_food_snapshots_nutrition_and_updates_totals():
    """
    Verifies:
    - 250 g kabsa = 450 kcal, 50 g dates = 138.5 kcal
    - plan totals equal the sum of meal food snapshots
    - later edits to the food do not change the snapshot
    """
    headers, _ = register_user("sarah")
    kabsa = create_food(headers, "kabsa")
    dates = create_food(headers, "dates")
    plan = create_meal_plan(headers)

    r1 = _add(headers, plan["id"], kabsa["id"], "lunch", 0, 250)
    assert r1.status_code == 201, r1.text
    meal_food = r1.json()
    assert meal_food["food_name"] == "Chicken Kabsa"
    assert meal_food["calories"] == pytest.approx(450)
    assert meal_food["sodium"] == pytest.approx(1050)
    assert meal_food["is_consumed"] is False

    r2 = _add(headers, plan["id"], dates["id"], "snack", 0, 50)
    assert r2.status_code == 201

    body = client.get(f"{API}/meal-plans/{plan['id']}", headers=headers).json()
    assert body["meal_count"] == 2
    assert body["totals"]["calories"] == pytest.approx(588.5)
    assert body["totals"]["protein"] == pytest.approx(23.4)
    assert body["totals"]["carbs"] == pytest.approx(100.0)
    assert body["totals"]["fat"] == pytest.approx(12.6)
    assert body["totals"]["fiber"] == pytest.approx(6.35)
    assert body["totals"]["calories"] == pytest.approx(
        sum(mf["calories"] for mf in body["meal_foods"])
    )

    client.patch(f"{API}/foods/{kabsa['id']}", json={"calories_per_100g": 300}, headers=headers)
    again = client.get(f"{API}/meal-plans/{plan['id']}", headers=headers).json()
    assert again["totals"]["calories"] == pytest.approx(588.5)


def test_add_food_validation():
    headers, _ = register_user("sarah")
    food = create_food(headers, "kabsa")
    plan = create_meal_plan(headers)

    assert_error(_add(headers, plan["id"], food["id"], day=7), 400, "VALIDATION_ERROR")
    assert_error(_add(headers, plan["id"], food["id"], grams=0), 400, "VALIDATION_ERROR")
    assert_error(_add(headers, plan["id"], food["id"], meal_type="brunch"), 400)
    assert_error(_add(headers, plan["id"], str(uuid.uuid4())), 404)


def test_remove_food_recomputes_totals():
    headers, _ = register_user("sarah")
    kabsa = create_food(headers, "kabsa")
    plan = create_meal_plan(headers)
    first = _add(headers, plan["id"], kabsa["id"], "lunch", 0, 250).json()
    _add(headers, plan["id"], kabsa["id"], "dinner", 1, 100)

    r = client.delete(f"{API}/meal-plans/{plan['id']}/foods/{first['id']}", headers=headers)
    assert r.status_code == 200, r.text
    assert r.json()["meal_count"] == 1
    assert r.json()["totals"]["calories"] == pytest.approx(180)

    missing = client.delete(f"{API}/meal-plans/{plan['id']}/foods/{first['id']}", headers=headers)
    assert_error(missing, 404)


def test_consume_and_unconsume():
    headers, _ = register_user("sarah")
    food = create_food(headers, "dates")
    plan = create_meal_plan(headers)
    mf = _add(headers, plan["id"], food["id"], "breakfast", 3, 30).json()
    path = f"{API}/meal-plans/{plan['id']}/foods/{mf['id']}/consume"

    consumed = client.post(path, headers=headers)
    assert consumed.status_code == 200
    assert consumed.json()["is_consumed"] is True
    assert consumed.json()["consumed_at"] is not None

    undone = client.delete(path, headers=headers)
    assert undone.status_code == 200
    assert undone.json()["is_consumed"] is False
    assert undone.json()["consumed_at"] is None


def test_day_view_groups_by_meal_type():
    headers, _ = register_user("sarah")
    kabsa = create_food(headers, "kabsa")
    labneh = create_food(headers, "labneh")
    plan = create_meal_plan(headers)
    _add(headers, plan["id"], labneh["id"], "breakfast", 2, 50)
    _add(headers, plan["id"], kabsa["id"], "lunch", 2, 250)
    _add(headers, plan["id"], kabsa["id"], "dinner", 4, 200)

    r = client.get(f"{API}/meal-plans/{plan['id']}/days/2", headers=headers)
    assert r.status_code == 200, r.text
    day = r.json()
    assert day["day_of_week"] == 2
    assert set(day["meals"]) == {"breakfast", "lunch", "dinner", "snack"}
    assert len(day["meals"]["breakfast"]) == 1
    assert len(day["meals"]["lunch"]) == 1
    assert day["meals"]["dinner"] == []
    assert day["totals"]["calories"] == pytest.approx(80 + 450)

    assert_error(client.get(f"{API}/meal-plans/{plan['id']}/days/7", headers=headers), 400)


def test_other_users_plan_is_not_found():
    owner_headers, _ = register_user("sarah")
    other_headers, _ = register_user("omar")
    food = create_food(owner_headers, "kabsa")
    plan = create_meal_plan(owner_headers)

    assert_error(client.get(f"{API}/meal-plans/{plan['id']}", headers=other_headers), 404)
    assert_error(_add(other_headers, plan["id"], food["id"]), 404)
    assert_error(client.delete(f"{API}/meal-plans/{plan['id']}", headers=other_headers), 404)
    assert client.get(f"{API}/meal-plans", headers=other_headers).json() == []


def test_delete_plan():
    headers, _ = register_user("sarah")
    food = create_food(headers, "kabsa")
    plan = create_meal_plan(headers)
    _add(headers, plan["id"], food["id"])

    r = client.delete(f"{API}/meal-plans/{plan['id']}", headers=headers)
    assert r.status_code == 200
    assert_error(client.get(f"{API}/meal-plans/{plan['id']}", headers=headers), 404)
    # the food is no longer referenced and can be deleted
    assert client.delete(f"{API}/foods/{food['id']}", headers=headers).status_code == 200
