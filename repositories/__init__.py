"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.food_repository import FoodRepository, FoodCategoryRepository
from repositories.meal_plan_repository import MealPlanRepository, MealFoodRepository
from repositories.store_repository import StoreRepository, FoodPriceRepository
from repositories.progress_repository import ProgressRepository
from repositories.favorite_repository import FavoriteRepository
from repositories.feedback_repository import FeedbackRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "FoodRepository",
    "FoodCategoryRepository",
    "MealPlanRepository",
    "MealFoodRepository",
    "StoreRepository",
    "FoodPriceRepository",
    "ProgressRepository",
    "FavoriteRepository",
    "FeedbackRepository",
]
