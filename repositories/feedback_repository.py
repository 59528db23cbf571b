"""
Feedback Repository - Data access layer for user feedback
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import UserFeedback


class FeedbackRepository(BaseRepository[UserFeedback]):
    """Repository for feedback data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserFeedback)

    def get_by_user_id(self, user_id: UUID) -> List[UserFeedback]:
        return (
            self.db.query(UserFeedback)
            .filter(UserFeedback.user_id == user_id)
            .order_by(UserFeedback.created_at.desc())
            .all()
        )

    def rating_stats_for_food(self, food_id: UUID) -> Tuple[int, Optional[float]]:
        """Return (rating count, average rating) over rated feedback for a food"""
        count, average = (
            self.db.query(func.count(UserFeedback.id), func.avg(UserFeedback.rating))
            .filter(UserFeedback.food_id == food_id, UserFeedback.rating.isnot(None))
            .one()
        )
        return int(count or 0), (float(average) if average is not None else None)
