"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (emails are stored lowercased)"""
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, **fields) -> User:
        """Create a new user; duplicate emails raise ConflictError"""
        user = User(**fields)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                "User with this email already exists", code="EMAIL_TAKEN"
            ) from e

    def update_user(self, user: User, **fields) -> User:
        """Apply the given attribute changes and persist them"""
        for key, value in fields.items():
            if hasattr(user, key):
                setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user
