from typing import Tuple
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import UnauthorizedError
from app.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from domain.models import User
from domain.schemas.auth_schemas import RegisterRequest, LoginRequest
from repositories import UserRepository

logger = logging.getLogger("smartbite.auth")


class AuthService:
    """Registration, login and bearer-token resolution"""

    @staticmethod
    def register(db: Session, payload: RegisterRequest) -> Tuple[User, str]:
        """
        Create an account and issue an access token.

        Raises:
            ConflictError: If the email is already registered
        """
        user_repo = UserRepository(db)
        fields = payload.model_dump(mode="json", exclude={"password"})
        user = user_repo.create_user(
            **fields, password_hash=hash_password(payload.password)
        )
        token = create_access_token(user.id, user.email)
        logger.info(f"user_registered user_id={user.id}")
        return user, token

    @staticmethod
    def login(db: Session, payload: LoginRequest) -> Tuple[User, str]:
        user_repo = UserRepository(db)
        user = user_repo.get_by_email(payload.email)
        if user is None or not verify_password(payload.password, user.password_hash):
            logger.warning(f"login_failed email={payload.email}")
            raise UnauthorizedError("Invalid credentials", code="INVALID_CREDENTIALS")
        if not user.is_active:
            logger.warning(f"login_inactive user_id={user.id}")
            raise UnauthorizedError("Account is deactivated", code="ACCOUNT_INACTIVE")

        token = create_access_token(user.id, user.email)
        logger.info(f"user_logged_in user_id={user.id}")
        return user, token

    @staticmethod
    def get_user_from_token(db: Session, token: str) -> User:
        """Resolve a bearer token to an active user (401 otherwise)."""
        payload = decode_access_token(token)
        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError as e:
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN") from e

        user = UserRepository(db).get_by_id(user_id)
        if user is None:
            raise UnauthorizedError("User not found", code="USER_NOT_FOUND")
        if not user.is_active:
            raise UnauthorizedError("Account is deactivated", code="ACCOUNT_INACTIVE")
        return user
