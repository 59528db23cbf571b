"""
Schemas for the USDA-backed food analysis proxy.

Field names on the wire are camelCase to match what the mobile app consumes.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FullPipelineRequest(CamelModel):
    dish_name: str = Field(..., description="Dish or food name to look up")
    diet_types: Optional[List[str]] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    @field_validator("dish_name")
    @classmethod
    def check_dish_name(cls, v):
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Dish name must be at least 2 characters")
        return v


class Macronutrients(CamelModel):
    protein: float
    carbohydrates: float
    fat: float


class NutrientValue(CamelModel):
    name: str
    value: float
    unit: str


class IngredientEntry(CamelModel):
    name: str
    category: str
    quantity: int
    unit: str


class FullPipelineResponse(CamelModel):
    source: str
    food_name: str
    total_calories: int
    macronutrients: Macronutrients
    nutrients: List[NutrientValue]
    ingredients: List[IngredientEntry]
    allergens: List[str]
    diet_compatibility: Dict[str, Any]
    labels: List[str]
    usda_data: Dict[str, Any] = Field(default_factory=dict, alias="_usdaData")


class UsdaNutrition(CamelModel):
    """Simplified nutrition extracted from one FoodData Central item"""

    fdc_id: Optional[int] = None
    name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    fiber: float
    sugar: float
    sodium: float
    serving_size: str
