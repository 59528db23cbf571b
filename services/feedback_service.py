from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import FeedbackType
from domain.models import User, UserFeedback
from domain.schemas.feedback_schemas import FeedbackCreate, FoodRatingSummary
from repositories import FeedbackRepository, FoodRepository, MealPlanRepository

logger = logging.getLogger("smartbite.feedback")


class FeedbackService:
    @staticmethod
    def submit_feedback(db: Session, user: User, payload: FeedbackCreate) -> UserFeedback:
        """
        Store a rating or comment.

        Meal plan feedback must reference one of the user's own plans; food
        feedback must reference an existing food.
        """
        if payload.rating is None and not (payload.feedback_text or "").strip():
            raise ServiceValidationError("Feedback needs a rating or a comment")

        if payload.feedback_type == FeedbackType.MEAL_PLAN and payload.meal_plan_id is None:
            raise ServiceValidationError("meal_plan_id is required for meal plan feedback")
        if payload.feedback_type == FeedbackType.FOOD and payload.food_id is None:
            raise ServiceValidationError("food_id is required for food feedback")

        if payload.meal_plan_id is not None:
            if not MealPlanRepository(db).get_for_user(payload.meal_plan_id, user.id):
                raise NotFoundError(f"Meal plan {payload.meal_plan_id} not found")
        if payload.food_id is not None:
            if not FoodRepository(db).exists(payload.food_id):
                raise NotFoundError(f"Food {payload.food_id} not found")

        feedback = FeedbackRepository(db).create(
            UserFeedback(
                user_id=user.id,
                meal_plan_id=payload.meal_plan_id,
                food_id=payload.food_id,
                rating=payload.rating,
                feedback_text=payload.feedback_text,
                feedback_type=payload.feedback_type.value,
            )
        )
        logger.info(
            f"feedback_submitted user_id={user.id} type={feedback.feedback_type} "
            f"rating={feedback.rating}"
        )
        return feedback

    @staticmethod
    def list_feedback(db: Session, user: User) -> List[UserFeedback]:
        return FeedbackRepository(db).get_by_user_id(user.id)

    @staticmethod
    def food_rating_summary(db: Session, food_id: UUID) -> FoodRatingSummary:
        if not FoodRepository(db).exists(food_id):
            raise NotFoundError(f"Food {food_id} not found")
        count, average = FeedbackRepository(db).rating_stats_for_food(food_id)
        return FoodRatingSummary(
            food_id=food_id,
            rating_count=count,
            average_rating=round(average, 2) if average is not None else None,
        )
