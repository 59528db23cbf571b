from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from domain.enums import MealType


class MealPlanCreate(BaseModel):
    week_start_date: date
    week_end_date: date
    is_generated: bool = False

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_dates(self):
        if self.week_end_date < self.week_start_date:
            raise ValueError("week_end_date must not be before week_start_date")
        return self


class MealPlanUpdate(BaseModel):
    week_start_date: Optional[date] = None
    week_end_date: Optional[date] = None

    model_config = {"extra": "forbid"}


class MealFoodCreate(BaseModel):
    food_id: UUID
    meal_type: MealType
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Monday, 6 = Sunday")
    serving_size: float = Field(..., gt=0, le=5000, description="Grams")

    model_config = {"extra": "forbid"}


class MealFoodResponse(BaseModel):
    id: UUID
    meal_plan_id: UUID
    food_id: UUID
    food_name: Optional[str] = None
    meal_type: str
    day_of_week: int
    serving_size: float
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float
    is_consumed: bool
    consumed_at: Optional[datetime] = None


class MealPlanTotals(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float


class MealPlanSummaryResponse(BaseModel):
    id: UUID
    user_id: UUID
    week_start_date: date
    week_end_date: date
    is_generated: bool
    totals: MealPlanTotals
    meal_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MealPlanResponse(MealPlanSummaryResponse):
    meal_foods: List[MealFoodResponse]


class MealPlanDayResponse(BaseModel):
    meal_plan_id: UUID
    day_of_week: int
    meals: Dict[str, List[MealFoodResponse]]
    totals: MealPlanTotals
