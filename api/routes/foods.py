"""Food catalog routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import Optional

from api.dependencies import get_db, get_current_user
from api.responses import (
    ERROR_RESPONSES,
    DeleteResponse,
    PaginatedResponse,
    paginated_response,
)
from domain.models import User
from domain.schemas.food_schemas import (
    FoodCreate,
    FoodUpdate,
    FoodResponse,
    FoodNutritionResponse,
    FoodPriceComparisonResponse,
)
from services.food_service import FoodService

router = APIRouter(prefix="/foods", tags=["Foods"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.foods")


@router.get("", response_model=PaginatedResponse[FoodResponse])
def list_foods(
    search: Optional[str] = Query(None, description="Match on name or Arabic name"),
    category: Optional[str] = Query(None),
    exclude_allergen: Optional[str] = Query(
        None, description="Hide foods listing this allergen"
    ),
    tag: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Search the food catalog"""
    foods, total = FoodService.list_foods(
        db,
        search=search,
        category=category,
        exclude_allergen=exclude_allergen,
        tag=tag,
        page=page,
        page_size=page_size,
    )
    items = [FoodResponse.model_validate(f) for f in foods]
    return paginated_response(items, total, page, page_size)


@router.get("/{food_id}", response_model=FoodResponse)
def get_food(food_id: UUID, db: Session = Depends(get_db)):
    return FoodResponse.model_validate(FoodService.get_food(db, food_id))


@router.get("/{food_id}/nutrition", response_model=FoodNutritionResponse)
def get_food_nutrition(
    food_id: UUID,
    serving_size: float = Query(100, gt=0, le=5000, description="Grams"),
    db: Session = Depends(get_db),
):
    """Nutrition for a serving size plus macro calorie percentages"""
    return FoodService.get_nutrition(db, food_id, serving_size)


@router.get("/{food_id}/prices", response_model=FoodPriceComparisonResponse)
def compare_food_prices(food_id: UUID, db: Session = Depends(get_db)):
    """Available prices at active stores, cheapest first"""
    return FoodService.compare_prices(db, food_id)


@router.post("", response_model=FoodResponse, status_code=status.HTTP_201_CREATED)
def create_food(
    payload: FoodCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    food = FoodService.create_food(db, payload)
    return FoodResponse.model_validate(food)


@router.patch("/{food_id}", response_model=FoodResponse)
def update_food(
    food_id: UUID,
    payload: FoodUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    food = FoodService.update_food(db, food_id, payload)
    return FoodResponse.model_validate(food)


@router.delete("/{food_id}", response_model=DeleteResponse)
def delete_food(
    food_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a food (refused while any meal plan uses it)"""
    FoodService.delete_food(db, food_id)
    return DeleteResponse(deleted=str(food_id))
