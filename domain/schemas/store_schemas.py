from pydantic import BaseModel, Field, StringConstraints
from typing import Annotated, Optional
from datetime import datetime
from uuid import UUID

StoreName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class StoreCreate(BaseModel):
    name: StoreName
    name_arabic: str = Field(..., min_length=1, max_length=255)
    logo_url: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=255)
    api_endpoint: Optional[str] = Field(None, max_length=255)
    is_active: bool = True

    model_config = {"extra": "forbid"}


class StoreUpdate(BaseModel):
    name: Optional[StoreName] = None
    name_arabic: Optional[str] = Field(None, min_length=1, max_length=255)
    logo_url: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=255)
    api_endpoint: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None

    model_config = {"extra": "forbid"}


class StoreResponse(BaseModel):
    id: UUID
    name: str
    name_arabic: str
    logo_url: Optional[str] = None
    website: Optional[str] = None
    api_endpoint: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FoodPriceUpsert(BaseModel):
    price: float = Field(..., ge=0, le=99999999.99)
    unit: str = Field("kg", min_length=1, max_length=20)
    is_available: bool = True

    model_config = {"extra": "forbid"}


class FoodPriceResponse(BaseModel):
    id: UUID
    food_id: UUID
    store_id: UUID
    price: float
    unit: str
    is_available: bool
    last_updated: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
