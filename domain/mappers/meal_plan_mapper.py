"""
Meal plan domain mappers.
Handles transformation between ORM models and DTOs for meal plans.
"""

from typing import Dict, Iterable, List

from domain.enums import MealType
from domain.helpers import round_to, to_float
from domain.models import MealPlan, MealFood
from domain.schemas.meal_plan_schemas import (
    MealFoodResponse,
    MealPlanResponse,
    MealPlanSummaryResponse,
    MealPlanDayResponse,
    MealPlanTotals,
)

_TOTAL_FIELDS = ("calories", "protein", "carbs", "fat", "fiber", "sugar", "sodium")


class MealPlanMapper:
    """Mapper for meal plan transformations."""

    @staticmethod
    def meal_food_to_response(meal_food: MealFood) -> MealFoodResponse:
        return MealFoodResponse(
            id=meal_food.id,
            meal_plan_id=meal_food.meal_plan_id,
            food_id=meal_food.food_id,
            food_name=meal_food.food.name if meal_food.food is not None else None,
            meal_type=meal_food.meal_type,
            day_of_week=meal_food.day_of_week,
            serving_size=to_float(meal_food.serving_size),
            calories=to_float(meal_food.calories),
            protein=to_float(meal_food.protein),
            carbs=to_float(meal_food.carbs),
            fat=to_float(meal_food.fat),
            fiber=to_float(meal_food.fiber),
            sugar=to_float(meal_food.sugar),
            sodium=to_float(meal_food.sodium),
            is_consumed=meal_food.is_consumed,
            consumed_at=meal_food.consumed_at,
        )

    @staticmethod
    def totals(meal_foods: Iterable[MealFood]) -> MealPlanTotals:
        meal_foods = list(meal_foods)
        return MealPlanTotals(
            **{
                field: round(sum(to_float(getattr(mf, field)) for mf in meal_foods), 2)
                for field in _TOTAL_FIELDS
            }
        )

    @staticmethod
    def _plan_fields(plan: MealPlan) -> dict:
        return {
            "id": plan.id,
            "user_id": plan.user_id,
            "week_start_date": plan.week_start_date,
            "week_end_date": plan.week_end_date,
            "is_generated": plan.is_generated,
            "totals": MealPlanTotals(
                calories=round_to(plan.total_calories),
                protein=round_to(plan.total_protein),
                carbs=round_to(plan.total_carbs),
                fat=round_to(plan.total_fat),
                fiber=round(plan.total_fiber, 2),
                sugar=round(plan.total_sugar, 2),
                sodium=round(plan.total_sodium, 2),
            ),
            "meal_count": len(plan.meal_foods),
            "created_at": plan.created_at,
            "updated_at": plan.updated_at,
        }

    @staticmethod
    def to_summary(plan: MealPlan) -> MealPlanSummaryResponse:
        return MealPlanSummaryResponse(**MealPlanMapper._plan_fields(plan))

    @staticmethod
    def to_response(plan: MealPlan) -> MealPlanResponse:
        return MealPlanResponse(
            **MealPlanMapper._plan_fields(plan),
            meal_foods=[
                MealPlanMapper.meal_food_to_response(mf) for mf in plan.meal_foods
            ],
        )

    @staticmethod
    def to_day_response(plan: MealPlan, day_of_week: int) -> MealPlanDayResponse:
        day_meals = plan.meals_by_day(day_of_week)
        meals: Dict[str, List[MealFoodResponse]] = {mt.value: [] for mt in MealType}
        for mf in day_meals:
            meals.setdefault(mf.meal_type, []).append(
                MealPlanMapper.meal_food_to_response(mf)
            )
        return MealPlanDayResponse(
            meal_plan_id=plan.id,
            day_of_week=day_of_week,
            meals=meals,
            totals=MealPlanMapper.totals(day_meals),
        )
