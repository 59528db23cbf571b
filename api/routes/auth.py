"""Registration and login routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from api.responses import ERROR_RESPONSES
from domain.mappers import UserMapper
from domain.models import User
from domain.schemas.auth_schemas import RegisterRequest, LoginRequest, AuthResponse
from domain.schemas.user_schemas import UserResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"], responses=ERROR_RESPONSES)
logger = logging.getLogger("smartbite.api.auth")


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account and return an access token"""
    user, token = AuthService.register(db, payload)
    return AuthResponse(access_token=token, user=UserMapper.to_response(user))


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user, token = AuthService.login(db, payload)
    return AuthResponse(access_token=token, user=UserMapper.to_response(user))


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """Return the account behind the bearer token"""
    return UserMapper.to_response(current_user)
