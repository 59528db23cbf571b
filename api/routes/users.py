"""Routes for the signed-in user's own account"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES, DeleteResponse
from domain.mappers import UserMapper
from domain.models import User
from domain.schemas.user_schemas import (
    UserProfileResponse,
    UserMetricsResponse,
    UserUpdate,
    PasswordChangeRequest,
)
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.users")


@router.get("/me", response_model=UserProfileResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    """Profile with computed BMI, BMR, TDEE and target calories"""
    return UserMapper.to_profile_response(current_user)


@router.patch("/me", response_model=UserProfileResponse)
def update_profile(
    payload: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = UserService.update_profile(db, current_user, payload)
    return UserMapper.to_profile_response(user)


@router.put("/me/password")
def change_password(
    payload: PasswordChangeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    UserService.change_password(db, current_user, payload)
    return {"status": "ok"}


@router.delete("/me", response_model=DeleteResponse)
def delete_account(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Delete the account and everything it owns"""
    user_id = str(current_user.id)
    UserService.delete_user(db, current_user)
    return DeleteResponse(deleted=user_id)


@router.get("/me/metrics", response_model=UserMetricsResponse)
def get_metrics(current_user: User = Depends(get_current_user)):
    return UserMapper.to_metrics(current_user)
