"""Favorite food routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.models import User, UserFavorite
from domain.schemas.feedback_schemas import FavoriteResponse
from services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.favorites")


def _to_response(favorite: UserFavorite) -> FavoriteResponse:
    return FavoriteResponse(
        id=favorite.id,
        food_id=favorite.food_id,
        food_name=favorite.food.name,
        category=favorite.food.category,
        created_at=favorite.created_at,
    )


@router.get("", response_model=List[FavoriteResponse])
def list_favorites(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return [_to_response(f) for f in FavoriteService.list_favorites(db, current_user)]


@router.post(
    "/{food_id}", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED
)
def add_favorite(
    food_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return _to_response(FavoriteService.add_favorite(db, current_user, food_id))


@router.delete("/{food_id}", response_model=DeleteResponse)
def remove_favorite(
    food_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    FavoriteService.remove_favorite(db, current_user, food_id)
    return DeleteResponse(deleted=str(food_id))
