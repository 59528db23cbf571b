"""
User-related database models.
"""

from sqlalchemy import (
    Column,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Numeric,
    Boolean,
    JSON,
    Uuid,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from datetime import datetime, timezone
import uuid

from domain.models.database import Base
from domain.enums import ACTIVITY_MULTIPLIERS, Gender, GoalType
from domain.helpers import to_float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """User account with body profile and dietary settings"""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    height = Column(Numeric(5, 2), nullable=False)  # cm
    weight = Column(Numeric(5, 2), nullable=False)  # kg
    target_weight = Column(Numeric(5, 2))
    gender = Column(String(20), nullable=False)
    activity_level = Column(String(50), nullable=False)
    goal = Column(String(50), nullable=False)
    allergies = Column(JSON, nullable=False, default=list)
    health_conditions = Column(JSON, nullable=False, default=list)
    food_preferences = Column(JSON, nullable=False, default=list)
    profile_image_url = Column(String(500))
    is_active = Column(Boolean, nullable=False, default=True)
    email_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    meal_plans = relationship(
        "MealPlan", back_populates="user", cascade="all, delete-orphan"
    )
    progress_records = relationship(
        "UserProgress", back_populates="user", cascade="all, delete-orphan"
    )
    favorites = relationship(
        "UserFavorite", back_populates="user", cascade="all, delete-orphan"
    )
    feedback = relationship(
        "UserFeedback", back_populates="user", cascade="all, delete-orphan"
    )

    # Computed body metrics
    @property
    def bmi(self) -> float:
        height_m = to_float(self.height) / 100
        if height_m <= 0:
            return 0.0
        return to_float(self.weight) / (height_m**2)

    @property
    def bmr(self) -> float:
        """Mifflin-St Jeor basal metabolic rate (kcal/day)."""
        base = 10 * to_float(self.weight) + 6.25 * to_float(self.height) - 5 * (
            self.age or 0
        )
        if (self.gender or "").lower() == Gender.MALE.value:
            return base + 5
        return base - 161

    @property
    def tdee(self) -> float:
        multiplier = ACTIVITY_MULTIPLIERS.get(self.activity_level, 1.2)
        return self.bmr * multiplier

    @property
    def target_calories(self) -> float:
        goal = (self.goal or "").lower()
        if goal == GoalType.WEIGHT_LOSS.value:
            return self.tdee - 500
        if goal == GoalType.WEIGHT_GAIN.value:
            return self.tdee + 500
        return self.tdee


class UserProgress(Base):
    """Point-in-time body measurements with metrics snapshotted at record time"""

    __tablename__ = "user_progress"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    weight = Column(Numeric(5, 2), nullable=False)
    bmi = Column(Numeric(5, 2), nullable=False)
    bmr = Column(Numeric(8, 2), nullable=False)
    tdee = Column(Numeric(8, 2), nullable=False)
    body_fat_percentage = Column(Numeric(4, 2))
    muscle_mass = Column(Numeric(5, 2))
    recorded_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), index=True
    )
    notes = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="progress_records")


class UserFavorite(Base):
    """Foods a user marked as favorite"""

    __tablename__ = "user_favorites"
    __table_args__ = (UniqueConstraint("user_id", "food_id"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    food_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("foods.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # set client-side: newest-first lists need sub-second resolution
    created_at = Column(
        TIMESTAMP(timezone=True), default=_utcnow, server_default=func.now()
    )

    user = relationship("User", back_populates="favorites")
    food = relationship("Food", back_populates="favorites")


class UserFeedback(Base):
    """Ratings and comments about meal plans, foods or the app"""

    __tablename__ = "user_feedback"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meal_plan_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("meal_plans.id", ondelete="SET NULL"),
        index=True,
    )
    food_id = Column(
        Uuid(as_uuid=True), ForeignKey("foods.id", ondelete="SET NULL"), index=True
    )
    rating = Column(Integer)
    feedback_text = Column(Text)
    feedback_type = Column(String(50), nullable=False)
    # set client-side: newest-first lists need sub-second resolution
    created_at = Column(
        TIMESTAMP(timezone=True), default=_utcnow, server_default=func.now()
    )

    user = relationship("User", back_populates="feedback")
    meal_plan = relationship("MealPlan", back_populates="feedback")
    food = relationship("Food", back_populates="feedback")
