"""
Progress Repository - Data access layer for body measurement records
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import UserProgress


class ProgressRepository(BaseRepository[UserProgress]):
    """Repository for progress data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserProgress)

    def get_for_user(self, progress_id: UUID, user_id: UUID) -> Optional[UserProgress]:
        return (
            self.db.query(UserProgress)
            .filter(UserProgress.id == progress_id, UserProgress.user_id == user_id)
            .first()
        )

    def get_by_user_id(
        self, user_id: UUID, start_date: datetime = None, end_date: datetime = None
    ) -> List[UserProgress]:
        """Get all progress records for a user within a date range, oldest first"""
        query = self.db.query(UserProgress).filter(UserProgress.user_id == user_id)

        if start_date:
            query = query.filter(UserProgress.recorded_at >= start_date)
        if end_date:
            query = query.filter(UserProgress.recorded_at <= end_date)

        return query.order_by(UserProgress.recorded_at.asc()).all()
