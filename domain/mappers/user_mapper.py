"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import (
    UserResponse,
    UserProfileResponse,
    UserMetricsResponse,
)


def bmi_category(bmi: float) -> str:
    """WHO adult BMI bands."""
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normal"
    if bmi < 30:
        return "overweight"
    return "obese"


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        return UserResponse.model_validate(user)

    @staticmethod
    def to_metrics(user: User) -> UserMetricsResponse:
        bmi = user.bmi
        return UserMetricsResponse(
            bmi=round(bmi, 2),
            bmi_category=bmi_category(bmi),
            bmr=round(user.bmr, 2),
            tdee=round(user.tdee, 2),
            target_calories=round(user.target_calories, 2),
        )

    @staticmethod
    def to_profile_response(user: User) -> UserProfileResponse:
        """
        Convert a User ORM model to UserProfileResponse DTO.

        Args:
            user: User ORM instance

        Returns:
            UserProfileResponse with the stored profile and computed metrics
        """
        base = UserResponse.model_validate(user).model_dump()
        return UserProfileResponse(**base, metrics=UserMapper.to_metrics(user))
