"""Meal plan routes (owner only)"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.mappers import MealPlanMapper
from domain.models import User
from domain.schemas.meal_plan_schemas import (
    MealPlanCreate,
    MealPlanUpdate,
    MealPlanResponse,
    MealPlanSummaryResponse,
    MealPlanDayResponse,
    MealFoodCreate,
    MealFoodResponse,
)
from services.meal_plan_service import MealPlanService

router = APIRouter(prefix="/meal-plans", tags=["Meal Plans"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.meal_plans")


@router.post("", response_model=MealPlanResponse, status_code=status.HTTP_201_CREATED)
def create_meal_plan(
    payload: MealPlanCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = MealPlanService.create_plan(db, current_user, payload)
    return MealPlanMapper.to_response(plan)


@router.get("", response_model=List[MealPlanSummaryResponse])
def list_meal_plans(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """The user's plans, newest week first"""
    plans = MealPlanService.list_plans(db, current_user)
    return [MealPlanMapper.to_summary(p) for p in plans]


@router.get("/{plan_id}", response_model=MealPlanResponse)
def get_meal_plan(
    plan_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = MealPlanService.get_plan(db, current_user, plan_id)
    return MealPlanMapper.to_response(plan)


@router.patch("/{plan_id}", response_model=MealPlanResponse)
def update_meal_plan(
    plan_id: UUID,
    payload: MealPlanUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = MealPlanService.update_plan(db, current_user, plan_id, payload)
    return MealPlanMapper.to_response(plan)


@router.delete("/{plan_id}", response_model=DeleteResponse)
def delete_meal_plan(
    plan_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealPlanService.delete_plan(db, current_user, plan_id)
    return DeleteResponse(deleted=str(plan_id))


@router.post(
    "/{plan_id}/foods",
    response_model=MealFoodResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_meal_food(
    plan_id: UUID,
    payload: MealFoodCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a food to a day and meal slot; plan totals are recomputed"""
    meal_food = MealPlanService.add_food(db, current_user, plan_id, payload)
    return MealPlanMapper.meal_food_to_response(meal_food)


@router.delete("/{plan_id}/foods/{meal_food_id}", response_model=MealPlanResponse)
def remove_meal_food(
    plan_id: UUID,
    meal_food_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = MealPlanService.remove_food(db, current_user, plan_id, meal_food_id)
    return MealPlanMapper.to_response(plan)


@router.post(
    "/{plan_id}/foods/{meal_food_id}/consume", response_model=MealFoodResponse
)
def mark_consumed(
    plan_id: UUID,
    meal_food_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal_food = MealPlanService.set_consumed(
        db, current_user, plan_id, meal_food_id, consumed=True
    )
    return MealPlanMapper.meal_food_to_response(meal_food)


@router.delete(
    "/{plan_id}/foods/{meal_food_id}/consume", response_model=MealFoodResponse
)
def unmark_consumed(
    plan_id: UUID,
    meal_food_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal_food = MealPlanService.set_consumed(
        db, current_user, plan_id, meal_food_id, consumed=False
    )
    return MealPlanMapper.meal_food_to_response(meal_food)


@router.get("/{plan_id}/days/{day_of_week}", response_model=MealPlanDayResponse)
def get_meal_plan_day(
    plan_id: UUID,
    day_of_week: int = Path(..., description="0 = Monday, 6 = Sunday"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """One day of a plan grouped by meal type, with day totals"""
    plan = MealPlanService.get_day(db, current_user, plan_id, day_of_week)
    return MealPlanMapper.to_day_response(plan, day_of_week)
