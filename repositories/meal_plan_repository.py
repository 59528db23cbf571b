"""
Meal Plan Repository - Data access layer for meal plans and their foods
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealPlan, MealFood


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def get_for_user(self, plan_id: UUID, user_id: UUID) -> Optional[MealPlan]:
        """Get a plan only if it belongs to the given user"""
        return (
            self.db.query(MealPlan)
            .filter(MealPlan.id == plan_id, MealPlan.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: UUID) -> List[MealPlan]:
        return (
            self.db.query(MealPlan)
            .filter(MealPlan.user_id == user_id)
            .order_by(MealPlan.week_start_date.desc())
            .all()
        )


class MealFoodRepository(BaseRepository[MealFood]):
    """Repository for meal food data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealFood)

    def get_in_plan(self, meal_food_id: UUID, plan_id: UUID) -> Optional[MealFood]:
        return (
            self.db.query(MealFood)
            .filter(MealFood.id == meal_food_id, MealFood.meal_plan_id == plan_id)
            .first()
        )

    def count_for_food(self, food_id: UUID) -> int:
        return (
            self.db.query(func.count(MealFood.id))
            .filter(MealFood.food_id == food_id)
            .scalar()
        )
