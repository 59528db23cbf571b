from typing import List, Optional
import logging

from adapters import usda_adapter
from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.analysis_schemas import (
    FullPipelineResponse,
    IngredientEntry,
    Macronutrients,
    NutrientValue,
    UsdaNutrition,
)

logger = logging.getLogger("smartbite.food_analysis")


class FoodAnalysisService:
    """Nutrition lookups backed by USDA FoodData Central"""

    @staticmethod
    def full_pipeline_analysis(
        dish_name: str, diet_types: Optional[List[str]] = None
    ) -> FullPipelineResponse:
        """
        Look up a dish in FDC and reshape the best match for the mobile app.

        FDC carries no allergen, diet or label data, so those fields are empty.
        ``diet_types`` is accepted for compatibility and not used.

        Raises:
            ServiceValidationError: Dish name shorter than 2 characters
            NotFoundError: FDC has no match
            UpstreamServiceError: FDC unreachable, failing or not configured
        """
        dish_name = (dish_name or "").strip()
        if len(dish_name) < 2:
            raise ServiceValidationError("Dish name must be at least 2 characters")

        logger.info(f"full_pipeline_started dish={dish_name}")
        result = usda_adapter.get_client().search_and_get_nutrition(dish_name)
        if not result:
            raise NotFoundError(
                f"No nutrition data found in USDA API for: {dish_name}",
                code="NO_USDA_MATCH",
            )

        nutrition = result["nutrition"]
        food_name = nutrition.get("name") or dish_name
        serving_size = nutrition.get("serving_size") or usda_adapter.DEFAULT_SERVING_SIZE

        response = FullPipelineResponse(
            source="usda",
            food_name=food_name,
            total_calories=nutrition.get("calories") or 0,
            macronutrients=Macronutrients(
                protein=nutrition.get("protein") or 0,
                carbohydrates=nutrition.get("carbs") or 0,
                fat=nutrition.get("fat") or 0,
            ),
            nutrients=[
                NutrientValue(name="Fiber", value=nutrition.get("fiber") or 0, unit="g"),
                NutrientValue(name="Sugar", value=nutrition.get("sugar") or 0, unit="g"),
                NutrientValue(name="Sodium", value=nutrition.get("sodium") or 0, unit="mg"),
            ],
            ingredients=[
                IngredientEntry(
                    name=food_name, category="main", quantity=1, unit=serving_size
                )
            ],
            allergens=[],
            diet_compatibility={},
            labels=[],
            usda_data=result.get("raw_data") or {},
        )
        logger.info(
            f"full_pipeline_completed dish={dish_name} fdc_id={nutrition.get('fdc_id')}"
        )
        return response

    @staticmethod
    def search_foods(query: str, page_size: Optional[int] = None) -> List[UsdaNutrition]:
        """Simplified nutrition for every FDC match of the query."""
        query = (query or "").strip()
        if len(query) < 2:
            raise ServiceValidationError("Query must be at least 2 characters")
        results = usda_adapter.get_client().search_foods(
            query, page_size or settings.usda_search_page_size
        )
        return [
            UsdaNutrition(**usda_adapter.convert_to_nutrition(food))
            for food in results.get("foods") or []
        ]

    @staticmethod
    def get_food(fdc_id: int) -> UsdaNutrition:
        food = usda_adapter.get_client().get_food_details(fdc_id)
        return UsdaNutrition(**usda_adapter.convert_to_nutrition(food))
