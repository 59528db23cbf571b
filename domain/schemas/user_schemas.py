from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from typing import Annotated, Optional, List
from datetime import datetime
from uuid import UUID

from domain.enums import Gender, ActivityLevel, GoalType
from domain.helpers import normalize_tags

# Stripped before the length check
PersonName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)
]


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    age: int
    height: float
    weight: float
    target_weight: Optional[float] = None
    gender: str
    activity_level: str
    goal: str
    allergies: List[str]
    health_conditions: List[str]
    food_preferences: List[str]
    profile_image_url: Optional[str] = None
    is_active: bool
    email_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserMetricsResponse(BaseModel):
    """Derived body metrics"""

    bmi: float
    bmi_category: str
    bmr: float
    tdee: float
    target_calories: float


class UserProfileResponse(UserResponse):
    """User profile plus computed metrics"""

    metrics: UserMetricsResponse


class UserUpdate(BaseModel):
    """Partial profile update; only provided fields are changed"""

    name: Optional[PersonName] = None
    age: Optional[int] = Field(None, ge=13, le=120)
    height: Optional[float] = Field(None, ge=100, le=250)
    weight: Optional[float] = Field(None, ge=20, le=300)
    target_weight: Optional[float] = Field(None, ge=20, le=300)
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    goal: Optional[GoalType] = None
    allergies: Optional[List[str]] = None
    health_conditions: Optional[List[str]] = None
    food_preferences: Optional[List[str]] = None
    profile_image_url: Optional[str] = Field(None, max_length=500)

    model_config = {"extra": "forbid"}

    @field_validator("allergies", "health_conditions", "food_preferences")
    @classmethod
    def normalize_lists(cls, v):
        return normalize_tags(v) if v is not None else v


class PasswordChangeRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=50)

    model_config = {"extra": "forbid"}


class UserCreateFields(BaseModel):
    """Profile fields required at registration"""

    email: EmailStr
    name: PersonName
    age: int = Field(..., ge=13, le=120)
    height: float = Field(..., ge=100, le=250, description="Height in centimeters")
    weight: float = Field(..., ge=20, le=300, description="Weight in kilograms")
    target_weight: Optional[float] = Field(None, ge=20, le=300)
    gender: Gender
    activity_level: ActivityLevel
    goal: GoalType
    allergies: List[str] = Field(default_factory=list)
    health_conditions: List[str] = Field(default_factory=list)
    food_preferences: List[str] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()

    @field_validator("allergies", "health_conditions", "food_preferences")
    @classmethod
    def normalize_lists(cls, v):
        return normalize_tags(v)
