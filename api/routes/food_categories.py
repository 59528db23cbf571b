"""Food category routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.models import User
from domain.schemas.food_schemas import (
    FoodCategoryCreate,
    FoodCategoryUpdate,
    FoodCategoryResponse,
    FoodCategoryDetailResponse,
)
from services.food_service import FoodService

router = APIRouter(
    prefix="/food-categories", tags=["Food Categories"], responses=ERROR_RESPONSES
)
logger = logging.getLogger("smartbite.api.food_categories")


@router.get("", response_model=List[FoodCategoryResponse])
def list_categories(
    roots_only: bool = Query(False, description="Only top-level categories"),
    db: Session = Depends(get_db),
):
    categories = FoodService.list_categories(db, roots_only=roots_only)
    return [FoodCategoryResponse.model_validate(c) for c in categories]


@router.get("/{category_id}", response_model=FoodCategoryDetailResponse)
def get_category(category_id: UUID, db: Session = Depends(get_db)):
    """Category with its direct subcategories"""
    category = FoodService.get_category(db, category_id)
    return FoodCategoryDetailResponse.model_validate(category)


@router.post(
    "", response_model=FoodCategoryResponse, status_code=status.HTTP_201_CREATED
)
def create_category(
    payload: FoodCategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    category = FoodService.create_category(db, payload)
    return FoodCategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=FoodCategoryResponse)
def update_category(
    category_id: UUID,
    payload: FoodCategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    category = FoodService.update_category(db, category_id, payload)
    return FoodCategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=DeleteResponse)
def delete_category(
    category_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    FoodService.delete_category(db, category_id)
    return DeleteResponse(deleted=str(category_id))
