"""
Favorite Repository - Data access layer for user favorite foods
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import UserFavorite


class FavoriteRepository(BaseRepository[UserFavorite]):
    """Repository for favorite data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserFavorite)

    def get_by_user_and_food(
        self, user_id: UUID, food_id: UUID
    ) -> Optional[UserFavorite]:
        return (
            self.db.query(UserFavorite)
            .filter(UserFavorite.user_id == user_id, UserFavorite.food_id == food_id)
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[UserFavorite]:
        return (
            self.db.query(UserFavorite)
            .filter(UserFavorite.user_id == user_id)
            .order_by(UserFavorite.created_at.desc())
            .all()
        )
