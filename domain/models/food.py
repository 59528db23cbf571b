"""
Food catalog models: categories and foods with per-100g nutrition.
"""

from sqlalchemy import (
    Column,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Numeric,
    JSON,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.helpers import to_float

# (response key, column) pairs scaled by serving size
NUTRIENT_FIELDS = (
    ("calories", "calories_per_100g"),
    ("protein", "protein_per_100g"),
    ("carbs", "carbs_per_100g"),
    ("fat", "fat_per_100g"),
    ("fiber", "fiber_per_100g"),
    ("sugar", "sugar_per_100g"),
    ("sodium", "sodium_per_100g"),
)


class FoodCategory(Base):
    """Hierarchical food category"""

    __tablename__ = "food_categories"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    name_arabic = Column(String(100), nullable=False)
    description = Column(Text)
    parent_id = Column(
        Uuid(as_uuid=True), ForeignKey("food_categories.id"), index=True
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    parent = relationship("FoodCategory", remote_side=[id], back_populates="children")
    children = relationship("FoodCategory", back_populates="parent")
    foods = relationship("Food", back_populates="food_category")


class Food(Base):
    """Food item with nutrition values per 100 grams"""

    __tablename__ = "foods"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    name_arabic = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    category_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("food_categories.id", ondelete="SET NULL"),
        index=True,
    )
    description = Column(Text)
    calories_per_100g = Column(Numeric(8, 2), nullable=False)
    protein_per_100g = Column(Numeric(8, 2), nullable=False)
    carbs_per_100g = Column(Numeric(8, 2), nullable=False)
    fat_per_100g = Column(Numeric(8, 2), nullable=False)
    fiber_per_100g = Column(Numeric(8, 2), nullable=False, default=0)
    sugar_per_100g = Column(Numeric(8, 2), nullable=False, default=0)
    sodium_per_100g = Column(Numeric(8, 2), nullable=False, default=0)
    vitamins = Column(JSON, nullable=False, default=dict)
    minerals = Column(JSON, nullable=False, default=dict)
    allergens = Column(JSON, nullable=False, default=list)
    image_url = Column(String(500))
    recipe_instructions = Column(Text)
    preparation_time = Column(Integer, nullable=False, default=0)  # minutes
    servings = Column(Integer, nullable=False, default=1)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    food_category = relationship("FoodCategory", back_populates="foods")
    meal_foods = relationship("MealFood", back_populates="food")
    prices = relationship(
        "FoodPrice", back_populates="food", cascade="all, delete-orphan"
    )
    favorites = relationship(
        "UserFavorite", back_populates="food", cascade="all, delete-orphan"
    )
    feedback = relationship("UserFeedback", back_populates="food")

    def nutrition_for_serving(self, serving_size_grams: float) -> dict:
        """Scale every per-100g value to the given serving size."""
        multiplier = to_float(serving_size_grams) / 100
        return {
            key: to_float(getattr(self, column)) * multiplier
            for key, column in NUTRIENT_FIELDS
        }

    def macro_percentages(self) -> dict:
        """Share of calories coming from protein, carbs and fat."""
        total_calories = to_float(self.calories_per_100g)
        if total_calories <= 0:
            return {"protein": 0.0, "carbs": 0.0, "fat": 0.0}
        return {
            "protein": to_float(self.protein_per_100g) * 4 / total_calories * 100,
            "carbs": to_float(self.carbs_per_100g) * 4 / total_calories * 100,
            "fat": to_float(self.fat_per_100g) * 9 / total_calories * 100,
        }

    def contains_allergen(self, allergen: str) -> bool:
        needle = allergen.lower()
        return any(needle in (a or "").lower() for a in (self.allergens or []))
