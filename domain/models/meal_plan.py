"""
Meal planning models.
"""

from sqlalchemy import (
    Column,
    String,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Numeric,
    Date,
    Boolean,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.helpers import to_float


class MealPlan(Base):
    """Weekly meal plan"""

    __tablename__ = "meal_plans"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    week_start_date = Column(Date, nullable=False, index=True)
    week_end_date = Column(Date, nullable=False, index=True)
    total_calories = Column(Numeric(8, 2))
    total_protein = Column(Numeric(8, 2))
    total_carbs = Column(Numeric(8, 2))
    total_fat = Column(Numeric(8, 2))
    is_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("User", back_populates="meal_plans")
    meal_foods = relationship(
        "MealFood",
        back_populates="meal_plan",
        cascade="all, delete-orphan",
        order_by="MealFood.day_of_week",
    )
    feedback = relationship("UserFeedback", back_populates="meal_plan")

    def _sum(self, field: str) -> float:
        return sum(to_float(getattr(mf, field)) for mf in self.meal_foods or [])

    @property
    def total_fiber(self) -> float:
        return self._sum("fiber")

    @property
    def total_sugar(self) -> float:
        return self._sum("sugar")

    @property
    def total_sodium(self) -> float:
        return self._sum("sodium")

    def recalculate_totals(self) -> None:
        """Recompute stored macro totals from the meal foods."""
        self.total_calories = round(self._sum("calories"), 2)
        self.total_protein = round(self._sum("protein"), 2)
        self.total_carbs = round(self._sum("carbs"), 2)
        self.total_fat = round(self._sum("fat"), 2)

    def meals_by_type(self, meal_type: str) -> list:
        return [mf for mf in self.meal_foods or [] if mf.meal_type == meal_type]

    def meals_by_day(self, day_of_week: int) -> list:
        return [mf for mf in self.meal_foods or [] if mf.day_of_week == day_of_week]


class MealFood(Base):
    """A food placed in a meal plan slot, with nutrition snapshotted for its serving"""

    __tablename__ = "meal_foods"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    meal_plan_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("meal_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    food_id = Column(
        Uuid(as_uuid=True), ForeignKey("foods.id"), nullable=False, index=True
    )
    meal_type = Column(String(20), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False, index=True)  # 0 = Monday
    serving_size = Column(Numeric(8, 2), nullable=False)  # grams
    calories = Column(Numeric(8, 2), nullable=False)
    protein = Column(Numeric(8, 2), nullable=False)
    carbs = Column(Numeric(8, 2), nullable=False)
    fat = Column(Numeric(8, 2), nullable=False)
    fiber = Column(Numeric(8, 2), nullable=False)
    sugar = Column(Numeric(8, 2), nullable=False)
    sodium = Column(Numeric(8, 2), nullable=False)
    is_consumed = Column(Boolean, nullable=False, default=False)
    consumed_at = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    meal_plan = relationship("MealPlan", back_populates="meal_foods")
    food = relationship("Food", back_populates="meal_foods")
