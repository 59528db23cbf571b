from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from domain.enums import FeedbackType


class FeedbackCreate(BaseModel):
    feedback_type: FeedbackType
    meal_plan_id: Optional[UUID] = None
    food_id: Optional[UUID] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    feedback_text: Optional[str] = Field(None, max_length=5000)

    model_config = {"extra": "forbid"}


class FeedbackResponse(BaseModel):
    id: UUID
    user_id: UUID
    meal_plan_id: Optional[UUID] = None
    food_id: Optional[UUID] = None
    rating: Optional[int] = None
    feedback_text: Optional[str] = None
    feedback_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FoodRatingSummary(BaseModel):
    food_id: UUID
    rating_count: int
    average_rating: Optional[float] = None


class FavoriteResponse(BaseModel):
    id: UUID
    food_id: UUID
    food_name: str
    category: str
    created_at: Optional[datetime] = None
