"""USDA FoodData Central proxy routes (no database required)"""

from fastapi import APIRouter, Query
from fastapi.concurrency import run_in_threadpool
import logging
from typing import List, Optional

from api.responses import ErrorResponse
from domain.schemas.analysis_schemas import (
    FullPipelineRequest,
    FullPipelineResponse,
    UsdaNutrition,
)
from services.food_analysis_service import FoodAnalysisService

router = APIRouter(
    prefix="/food-analysis",
    tags=["Food Analysis"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        404: {"model": ErrorResponse, "description": "No USDA match"},
        503: {"model": ErrorResponse, "description": "USDA API unavailable"},
    },
)
logger = logging.getLogger("smartbite.api.food_analysis")


@router.post(
    "/full-pipeline",
    response_model=FullPipelineResponse,
    response_model_by_alias=True,
)
async def full_pipeline(payload: FullPipelineRequest):
    """Nutrition for a dish from USDA FoodData Central, in the app's format"""
    logger.info(f"full_pipeline_request dish={payload.dish_name}")
    return await run_in_threadpool(
        FoodAnalysisService.full_pipeline_analysis,
        payload.dish_name,
        payload.diet_types,
    )


@router.get("/search", response_model=List[UsdaNutrition])
async def search_usda_foods(
    query: str = Query(..., min_length=2),
    page_size: Optional[int] = Query(None, ge=1, le=50),
):
    return await run_in_threadpool(FoodAnalysisService.search_foods, query, page_size)


@router.get("/foods/{fdc_id}", response_model=UsdaNutrition)
async def get_usda_food(fdc_id: int):
    return await run_in_threadpool(FoodAnalysisService.get_food, fdc_id)
