from pydantic import BaseModel, Field, StringConstraints, field_validator
from typing import Annotated, Optional, List, Dict
from datetime import datetime
from uuid import UUID

from domain.helpers import normalize_tags

CategoryName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]


# =============================================================================
# Categories
# =============================================================================


class FoodCategoryCreate(BaseModel):
    name: CategoryName
    name_arabic: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    parent_id: Optional[UUID] = None

    model_config = {"extra": "forbid"}


class FoodCategoryUpdate(BaseModel):
    name: Optional[CategoryName] = None
    name_arabic: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    parent_id: Optional[UUID] = None

    model_config = {"extra": "forbid"}


class FoodCategoryResponse(BaseModel):
    id: UUID
    name: str
    name_arabic: str
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FoodCategoryDetailResponse(FoodCategoryResponse):
    children: List[FoodCategoryResponse] = []


# =============================================================================
# Foods
# =============================================================================


class FoodBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    name_arabic: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    category_id: Optional[UUID] = None
    description: Optional[str] = None
    calories_per_100g: float = Field(..., ge=0, le=900)
    protein_per_100g: float = Field(..., ge=0, le=100)
    carbs_per_100g: float = Field(..., ge=0, le=100)
    fat_per_100g: float = Field(..., ge=0, le=100)
    fiber_per_100g: float = Field(0, ge=0, le=100)
    sugar_per_100g: float = Field(0, ge=0, le=100)
    sodium_per_100g: float = Field(0, ge=0, le=40000, description="Milligrams")
    vitamins: Dict[str, float] = Field(default_factory=dict)
    minerals: Dict[str, float] = Field(default_factory=dict)
    allergens: List[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(None, max_length=500)
    recipe_instructions: Optional[str] = None
    preparation_time: int = Field(0, ge=0, description="Minutes")
    servings: int = Field(1, ge=1)
    tags: List[str] = Field(default_factory=list)


class FoodCreate(FoodBase):
    model_config = {"extra": "forbid"}

    @field_validator("allergens", "tags")
    @classmethod
    def normalize_lists(cls, v):
        return normalize_tags(v)


class FoodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    name_arabic: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[UUID] = None
    description: Optional[str] = None
    calories_per_100g: Optional[float] = Field(None, ge=0, le=900)
    protein_per_100g: Optional[float] = Field(None, ge=0, le=100)
    carbs_per_100g: Optional[float] = Field(None, ge=0, le=100)
    fat_per_100g: Optional[float] = Field(None, ge=0, le=100)
    fiber_per_100g: Optional[float] = Field(None, ge=0, le=100)
    sugar_per_100g: Optional[float] = Field(None, ge=0, le=100)
    sodium_per_100g: Optional[float] = Field(None, ge=0, le=40000)
    vitamins: Optional[Dict[str, float]] = None
    minerals: Optional[Dict[str, float]] = None
    allergens: Optional[List[str]] = None
    image_url: Optional[str] = Field(None, max_length=500)
    recipe_instructions: Optional[str] = None
    preparation_time: Optional[int] = Field(None, ge=0)
    servings: Optional[int] = Field(None, ge=1)
    tags: Optional[List[str]] = None

    model_config = {"extra": "forbid"}

    @field_validator("allergens", "tags")
    @classmethod
    def normalize_lists(cls, v):
        return normalize_tags(v) if v is not None else v


class FoodResponse(FoodBase):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ServingNutrition(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float


class MacroPercentages(BaseModel):
    protein: float
    carbs: float
    fat: float


class FoodNutritionResponse(BaseModel):
    food_id: UUID
    name: str
    serving_size: float
    nutrition: ServingNutrition
    macro_percentages: MacroPercentages


class FoodPriceEntry(BaseModel):
    store_id: UUID
    store_name: str
    price: float
    unit: str
    is_available: bool
    last_updated: Optional[datetime] = None


class FoodPriceComparisonResponse(BaseModel):
    food_id: UUID
    food_name: str
    prices: List[FoodPriceEntry]
    cheapest: Optional[FoodPriceEntry] = None
