from datetime import datetime, timezone
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import MealPlan, MealFood, User
from domain.schemas.meal_plan_schemas import (
    MealPlanCreate,
    MealPlanUpdate,
    MealFoodCreate,
)
from repositories import FoodRepository, MealPlanRepository, MealFoodRepository

logger = logging.getLogger("smartbite.meal_plans")


class MealPlanService:
    """
    Business logic for weekly meal plans.

    Plans are always looked up together with their owner, so another user's
    plan is indistinguishable from a missing one (404).
    """

    @staticmethod
    def create_plan(db: Session, user: User, payload: MealPlanCreate) -> MealPlan:
        plan = MealPlan(
            user_id=user.id,
            week_start_date=payload.week_start_date,
            week_end_date=payload.week_end_date,
            is_generated=payload.is_generated,
            total_calories=0,
            total_protein=0,
            total_carbs=0,
            total_fat=0,
        )
        plan = MealPlanRepository(db).create(plan)
        logger.info(
            f"meal_plan_created plan_id={plan.id} user_id={user.id} "
            f"week_start={plan.week_start_date}"
        )
        return plan

    @staticmethod
    def list_plans(db: Session, user: User) -> List[MealPlan]:
        return MealPlanRepository(db).list_for_user(user.id)

    @staticmethod
    def get_plan(db: Session, user: User, plan_id: UUID) -> MealPlan:
        plan = MealPlanRepository(db).get_for_user(plan_id, user.id)
        if not plan:
            logger.warning(f"meal_plan_not_found plan_id={plan_id} user_id={user.id}")
            raise NotFoundError(f"Meal plan {plan_id} not found")
        return plan

    @staticmethod
    def update_plan(
        db: Session, user: User, plan_id: UUID, payload: MealPlanUpdate
    ) -> MealPlan:
        plan = MealPlanService.get_plan(db, user, plan_id)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        start = changes.get("week_start_date", plan.week_start_date)
        end = changes.get("week_end_date", plan.week_end_date)
        if end < start:
            raise ServiceValidationError(
                "week_end_date must not be before week_start_date",
                details={"week_start_date": str(start), "week_end_date": str(end)},
            )
        for key, value in changes.items():
            setattr(plan, key, value)
        plan = MealPlanRepository(db).update(plan)
        logger.info(f"meal_plan_updated plan_id={plan.id}")
        return plan

    @staticmethod
    def delete_plan(db: Session, user: User, plan_id: UUID) -> None:
        plan = MealPlanService.get_plan(db, user, plan_id)
        db.delete(plan)
        db.commit()
        logger.info(f"meal_plan_deleted plan_id={plan_id} user_id={user.id}")

    @staticmethod
    def add_food(
        db: Session, user: User, plan_id: UUID, payload: MealFoodCreate
    ) -> MealFood:
        """
        Place a food in a plan slot.

        Nutrition is snapshotted for the serving size, so later edits to the
        food do not change existing plans. Plan totals are recomputed.
        """
        plan = MealPlanService.get_plan(db, user, plan_id)
        food = FoodRepository(db).get_by_id(payload.food_id)
        if not food:
            raise NotFoundError(f"Food {payload.food_id} not found")

        nutrition = {
            key: round(value, 2)
            for key, value in food.nutrition_for_serving(payload.serving_size).items()
        }
        meal_food = MealFood(
            food_id=food.id,
            meal_type=payload.meal_type.value,
            day_of_week=payload.day_of_week,
            serving_size=payload.serving_size,
            **nutrition,
        )
        plan.meal_foods.append(meal_food)
        plan.recalculate_totals()
        db.commit()
        db.refresh(meal_food)
        logger.info(
            f"meal_food_added plan_id={plan.id} food_id={food.id} "
            f"day={payload.day_of_week} meal_type={payload.meal_type.value}"
        )
        return meal_food

    @staticmethod
    def _get_meal_food(db: Session, plan: MealPlan, meal_food_id: UUID) -> MealFood:
        meal_food = MealFoodRepository(db).get_in_plan(meal_food_id, plan.id)
        if meal_food:
            return meal_food
        raise NotFoundError(f"Meal food {meal_food_id} not found in this plan")

    @staticmethod
    def remove_food(db: Session, user: User, plan_id: UUID, meal_food_id: UUID) -> MealPlan:
        plan = MealPlanService.get_plan(db, user, plan_id)
        meal_food = MealPlanService._get_meal_food(db, plan, meal_food_id)
        plan.meal_foods.remove(meal_food)
        plan.recalculate_totals()
        db.commit()
        db.refresh(plan)
        logger.info(f"meal_food_removed plan_id={plan.id} meal_food_id={meal_food_id}")
        return plan

    @staticmethod
    def set_consumed(
        db: Session, user: User, plan_id: UUID, meal_food_id: UUID, consumed: bool
    ) -> MealFood:
        plan = MealPlanService.get_plan(db, user, plan_id)
        meal_food = MealPlanService._get_meal_food(db, plan, meal_food_id)
        meal_food.is_consumed = consumed
        meal_food.consumed_at = datetime.now(timezone.utc) if consumed else None
        meal_food = MealFoodRepository(db).update(meal_food)
        logger.info(
            f"meal_food_consumed plan_id={plan.id} meal_food_id={meal_food_id} "
            f"consumed={consumed}"
        )
        return meal_food

    @staticmethod
    def get_day(db: Session, user: User, plan_id: UUID, day_of_week: int) -> MealPlan:
        if not 0 <= day_of_week <= 6:
            raise ServiceValidationError(
                "day_of_week must be between 0 (Monday) and 6 (Sunday)",
                details={"day_of_week": day_of_week},
            )
        return MealPlanService.get_plan(db, user, plan_id)
