from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.helpers import to_float
from domain.models import User, UserProgress
from domain.schemas.progress_schemas import ProgressCreate, ProgressSummaryResponse
from repositories import ProgressRepository

logger = logging.getLogger("smartbite.progress")


class ProgressService:
    """Body measurement history"""

    @staticmethod
    def record_progress(db: Session, user: User, payload: ProgressCreate) -> UserProgress:
        """
        Record a measurement.

        The user's current weight is updated first so the bmi/bmr/tdee
        snapshot reflects the new weight.
        """
        user.weight = payload.weight
        record = UserProgress(
            user_id=user.id,
            weight=payload.weight,
            bmi=round(user.bmi, 2),
            bmr=round(user.bmr, 2),
            tdee=round(user.tdee, 2),
            body_fat_percentage=payload.body_fat_percentage,
            muscle_mass=payload.muscle_mass,
            recorded_at=payload.recorded_at or datetime.now(timezone.utc),
            notes=payload.notes,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info(
            f"progress_recorded user_id={user.id} progress_id={record.id} "
            f"weight={payload.weight}"
        )
        return record

    @staticmethod
    def list_progress(
        db: Session,
        user: User,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[UserProgress]:
        if start and end and end < start:
            raise ServiceValidationError(
                "end must not be before start",
                details={"start": start.isoformat(), "end": end.isoformat()},
            )
        return ProgressRepository(db).get_by_user_id(user.id, start, end)

    @staticmethod
    def summarize(db: Session, user: User) -> ProgressSummaryResponse:
        records = ProgressRepository(db).get_by_user_id(user.id)
        if not records:
            raise NotFoundError("No progress records yet", code="NO_PROGRESS")

        first, latest = records[0], records[-1]
        first_weight = to_float(first.weight)
        latest_weight = to_float(latest.weight)
        target = to_float(user.target_weight, None)
        return ProgressSummaryResponse(
            record_count=len(records),
            first_weight=first_weight,
            latest_weight=latest_weight,
            weight_change=round(latest_weight - first_weight, 2),
            target_weight=target,
            remaining_to_target=(
                round(target - latest_weight, 2) if target is not None else None
            ),
            latest_bmi=to_float(latest.bmi),
            first_recorded_at=first.recorded_at,
            latest_recorded_at=latest.recorded_at,
        )

    @staticmethod
    def delete_progress(db: Session, user: User, progress_id: UUID) -> None:
        record = ProgressRepository(db).get_for_user(progress_id, user.id)
        if not record:
            raise NotFoundError(f"Progress record {progress_id} not found")
        db.delete(record)
        db.commit()
        logger.info(f"progress_deleted user_id={user.id} progress_id={progress_id}")
