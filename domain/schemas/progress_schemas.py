from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class ProgressCreate(BaseModel):
    """Schema for recording a body measurement"""

    weight: float = Field(..., ge=20, le=300, description="Weight in kilograms")
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=99.99)
    muscle_mass: Optional[float] = Field(None, ge=0, le=300)
    recorded_at: Optional[datetime] = Field(
        None, description="Measurement time (defaults to now)"
    )
    notes: Optional[str] = Field(None, max_length=2000)

    model_config = {"extra": "forbid"}


class ProgressResponse(BaseModel):
    id: UUID
    user_id: UUID
    weight: float
    bmi: float
    bmr: float
    tdee: float
    body_fat_percentage: Optional[float] = None
    muscle_mass: Optional[float] = None
    recorded_at: Optional[datetime] = None
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class ProgressSummaryResponse(BaseModel):
    """Weight trend across all progress records"""

    record_count: int
    first_weight: float
    latest_weight: float
    weight_change: float
    target_weight: Optional[float] = None
    remaining_to_target: Optional[float] = None
    latest_bmi: float
    first_recorded_at: Optional[datetime] = None
    latest_recorded_at: Optional[datetime] = None
