"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserResponse,
    UserProfileResponse,
    UserMetricsResponse,
    UserUpdate,
    PasswordChangeRequest,
)
from domain.schemas.auth_schemas import RegisterRequest, LoginRequest, AuthResponse
from domain.schemas.food_schemas import (
    FoodCategoryCreate,
    FoodCategoryUpdate,
    FoodCategoryResponse,
    FoodCategoryDetailResponse,
    FoodCreate,
    FoodUpdate,
    FoodResponse,
    FoodNutritionResponse,
    FoodPriceComparisonResponse,
)
from domain.schemas.meal_plan_schemas import (
    MealPlanCreate,
    MealPlanUpdate,
    MealFoodCreate,
    MealFoodResponse,
    MealPlanResponse,
    MealPlanSummaryResponse,
    MealPlanDayResponse,
)
from domain.schemas.store_schemas import (
    StoreCreate,
    StoreUpdate,
    StoreResponse,
    FoodPriceUpsert,
    FoodPriceResponse,
)
from domain.schemas.progress_schemas import (
    ProgressCreate,
    ProgressResponse,
    ProgressSummaryResponse,
)
from domain.schemas.feedback_schemas import (
    FeedbackCreate,
    FeedbackResponse,
    FoodRatingSummary,
    FavoriteResponse,
)
from domain.schemas.analysis_schemas import (
    FullPipelineRequest,
    FullPipelineResponse,
    UsdaNutrition,
)

__all__ = [
    "UserResponse",
    "UserProfileResponse",
    "UserMetricsResponse",
    "UserUpdate",
    "PasswordChangeRequest",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "FoodCategoryCreate",
    "FoodCategoryUpdate",
    "FoodCategoryResponse",
    "FoodCategoryDetailResponse",
    "FoodCreate",
    "FoodUpdate",
    "FoodResponse",
    "FoodNutritionResponse",
    "FoodPriceComparisonResponse",
    "MealPlanCreate",
    "MealPlanUpdate",
    "MealFoodCreate",
    "MealFoodResponse",
    "MealPlanResponse",
    "MealPlanSummaryResponse",
    "MealPlanDayResponse",
    "StoreCreate",
    "StoreUpdate",
    "StoreResponse",
    "FoodPriceUpsert",
    "FoodPriceResponse",
    "ProgressCreate",
    "ProgressResponse",
    "ProgressSummaryResponse",
    "FeedbackCreate",
    "FeedbackResponse",
    "FoodRatingSummary",
    "FavoriteResponse",
    "FullPipelineRequest",
    "FullPipelineResponse",
    "UsdaNutrition",
]
