"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.user_service import UserService
from services.food_service import FoodService
from services.meal_plan_service import MealPlanService
from services.store_service import StoreService
from services.progress_service import ProgressService
from services.favorite_service import FavoriteService
from services.feedback_service import FeedbackService
from services.food_analysis_service import FoodAnalysisService

__all__ = [
    "AuthService",
    "UserService",
    "FoodService",
    "MealPlanService",
    "StoreService",
    "ProgressService",
    "FavoriteService",
    "FeedbackService",
    "FoodAnalysisService",
]
