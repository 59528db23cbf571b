"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import User, UserProgress, UserFavorite, UserFeedback
from domain.models.food import Food, FoodCategory
from domain.models.meal_plan import MealPlan, MealFood
from domain.models.store import Store, FoodPrice

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # User models
    "User",
    "UserProgress",
    "UserFavorite",
    "UserFeedback",
    # Food catalog
    "Food",
    "FoodCategory",
    # Meal plan models
    "MealPlan",
    "MealFood",
    # Store models
    "Store",
    "FoodPrice",
]
