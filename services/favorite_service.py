from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import ConflictError, NotFoundError
from domain.models import User, UserFavorite
from repositories import FavoriteRepository, FoodRepository

logger = logging.getLogger("smartbite.favorites")


class FavoriteService:
    @staticmethod
    def list_favorites(db: Session, user: User) -> List[UserFavorite]:
        return FavoriteRepository(db).get_by_user_id(user.id)

    @staticmethod
    def add_favorite(db: Session, user: User, food_id: UUID) -> UserFavorite:
        if not FoodRepository(db).exists(food_id):
            raise NotFoundError(f"Food {food_id} not found")

        repo = FavoriteRepository(db)
        if repo.get_by_user_and_food(user.id, food_id):
            raise ConflictError("Food is already a favorite", code="ALREADY_FAVORITE")
        try:
            favorite = repo.create(UserFavorite(user_id=user.id, food_id=food_id))
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(
                "Food is already a favorite", code="ALREADY_FAVORITE"
            ) from e
        logger.info(f"favorite_added user_id={user.id} food_id={food_id}")
        return favorite

    @staticmethod
    def remove_favorite(db: Session, user: User, food_id: UUID) -> None:
        favorite = FavoriteRepository(db).get_by_user_and_food(user.id, food_id)
        if not favorite:
            raise NotFoundError(f"Food {food_id} is not a favorite")
        db.delete(favorite)
        db.commit()
        logger.info(f"favorite_removed user_id={user.id} food_id={food_id}")
