"""API routes package"""

from . import (
    health,
    auth,
    users,
    food_categories,
    foods,
    meal_plans,
    stores,
    progress,
    favorites,
    feedback,
    food_analysis,
)

__all__ = [
    "health",
    "auth",
    "users",
    "food_categories",
    "foods",
    "meal_plans",
    "stores",
    "progress",
    "favorites",
    "feedback",
    "food_analysis",
]
