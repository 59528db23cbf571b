"""User feedback routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES
from domain.models import User
from domain.schemas.feedback_schemas import (
    FeedbackCreate,
    FeedbackResponse,
    FoodRatingSummary,
)
from services.feedback_service import FeedbackService

router = APIRouter(prefix="/feedback", tags=["Feedback"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.feedback")


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
def submit_feedback(
    payload: FeedbackCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    feedback = FeedbackService.submit_feedback(db, current_user, payload)
    return FeedbackResponse.model_validate(feedback)


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """The user's own feedback, newest first"""
    return [
        FeedbackResponse.model_validate(f)
        for f in FeedbackService.list_feedback(db, current_user)
    ]


@router.get("/foods/{food_id}/summary", response_model=FoodRatingSummary)
def food_rating_summary(food_id: UUID, db: Session = Depends(get_db)):
    return FeedbackService.food_rating_summary(db, food_id)
