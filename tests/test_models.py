"""
Tests for computed values on the ORM models (no database round trip).

- User: BMI, BMR (Mifflin-St Jeor), TDEE, target calories
- Food: per-serving nutrition, macro percentages, allergen matching
- MealPlan: totals recalculation and day/meal-type grouping
"""

from decimal import Decimal

import pytest

from domain.models import Food, MealFood, MealPlan, User
from domain.mappers import bmi_category
from test_fixtures import REALISTIC_FOODS


def make_user(**overrides) -> User:
    fields = dict(
        email="metrics@example.com",
        password_hash="x",
        name="Metrics User",
        age=29,
        height=Decimal("165.00"),
        weight=Decimal("68.00"),
        gender="female",
        activity_level="lightly_active",
        goal="weight_loss",
    )
    fields.update(overrides)
    return User(**fields)


def make_food(key: str = "kabsa") -> Food:
    data = {k: v for k, v in REALISTIC_FOODS[key].items()}
    data.setdefault("fiber_per_100g", 0)
    data.setdefault("sugar_per_100g", 0)
    data.setdefault("sodium_per_100g", 0)
    return Food(**data)


# =============================================================================
# USER METRICS
# =============================================================================


def test_bmi_uses_height_in_meters():
    user = make_user()
    assert user.bmi == pytest.approx(68 / 1.65**2)


def test_bmi_is_zero_without_height():
    assert make_user(height=0).bmi == 0.0


def test_bmr_female_and_male():
    female = make_user()
    male = make_user(gender="male")
    assert female.bmr == pytest.approx(1405.25)
    assert male.bmr == pytest.approx(1571.25)


def test_bmr_other_gender_uses_female_offset():
    assert make_user(gender="other").bmr == pytest.approx(1405.25)


@pytest.mark.parametrize(
    "level,multiplier",
    [
        ("sedentary", 1.2),
        ("lightly_active", 1.375),
        ("moderately_active", 1.55),
        ("very_active", 1.725),
        ("extremely_active", 1.9),
        ("unknown_level", 1.2),
    ],
)
def test_tdee_multipliers(level, multiplier):
    user = make_user(activity_level=level)
    assert user.tdee == pytest.approx(1405.25 * multiplier)


@pytest.mark.parametrize(
    "goal,offset",
    [("weight_loss", -500), ("weight_gain", 500), ("maintenance", 0), ("muscle_gain", 0)],
)
def test_target_calories_by_goal(goal, offset):
    user = make_user(goal=goal)
    assert user.target_calories == pytest.approx(user.tdee + offset)


@pytest.mark.parametrize(
    "bmi,category",
    [(17.0, "underweight"), (18.5, "normal"), (24.99, "normal"), (25.0, "overweight"), (30.0, "obese")],
)
def test_bmi_category_bands(bmi, category):
    assert bmi_category(bmi) == category


# =============================================================================
# FOOD NUTRITION
# =============================================================================


def test_nutrition_for_serving_scales_every_value():
    food = make_food("kabsa")
    nutrition = food.nutrition_for_serving(250)

    assert nutrition["calories"] == pytest.approx(450)
    assert nutrition["protein"] == pytest.approx(22.5)
    assert nutrition["carbs"] == pytest.approx(62.5)
    assert nutrition["fat"] == pytest.approx(12.5)
    assert nutrition["fiber"] == pytest.approx(3.0)
    assert nutrition["sugar"] == pytest.approx(2.0)
    assert nutrition["sodium"] == pytest.approx(1050)


def test_macro_percentages():
    percentages = make_food("kabsa").macro_percentages()
    assert percentages["protein"] == pytest.approx(20.0)
    assert percentages["carbs"] == pytest.approx(55.5556, rel=1e-4)
    assert percentages["fat"] == pytest.approx(25.0)


def test_macro_percentages_zero_calories():
    water = Food(
        name="Water",
        name_arabic="ماء",
        category="drinks",
        calories_per_100g=0,
        protein_per_100g=0,
        carbs_per_100g=0,
        fat_per_100g=0,
    )
    assert water.macro_percentages() == {"protein": 0.0, "carbs": 0.0, "fat": 0.0}


def test_contains_allergen_is_case_insensitive_substring():
    labneh = make_food("labneh")
    assert labneh.contains_allergen("milk")
    assert labneh.contains_allergen("MIL")
    assert not labneh.contains_allergen("egg")
    assert not make_food("dates").contains_allergen("milk")


# =============================================================================
# MEAL PLAN TOTALS
# =============================================================================


def _meal_food(day, meal_type, **nutrition) -> MealFood:
    values = dict(calories=0, protein=0, carbs=0, fat=0, fiber=0, sugar=0, sodium=0)
    values.update(nutrition)
    return MealFood(day_of_week=day, meal_type=meal_type, serving_size=100, **values)


def test_recalculate_totals_and_grouping():
    plan = MealPlan()
    plan.meal_foods = [
        _meal_food(0, "breakfast", calories=138.5, protein=0.9, carbs=37.5, fat=0.1, fiber=3.35),
        _meal_food(0, "lunch", calories=450, protein=22.5, carbs=62.5, fat=12.5, sodium=1050),
        _meal_food(2, "lunch", calories=300, protein=10, carbs=20, fat=5),
    ]
    plan.recalculate_totals()

    assert plan.total_calories == pytest.approx(888.5)
    assert plan.total_protein == pytest.approx(33.4)
    assert plan.total_carbs == pytest.approx(120.0)
    assert plan.total_fat == pytest.approx(17.6)
    assert plan.total_fiber == pytest.approx(3.35)
    assert plan.total_sodium == pytest.approx(1050)
    assert len(plan.meals_by_day(0)) == 2
    assert len(plan.meals_by_day(5)) == 0
    assert len(plan.meals_by_type("lunch")) == 2
