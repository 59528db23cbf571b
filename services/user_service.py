from sqlalchemy.orm import Session
import logging

from app.exceptions import UnauthorizedError
from app.security import hash_password, verify_password
from domain.models import User
from domain.schemas.user_schemas import UserUpdate, PasswordChangeRequest
from repositories import UserRepository

logger = logging.getLogger("smartbite.users")

# Profile fields that may be cleared with an explicit null
CLEARABLE_FIELDS = {"target_weight", "profile_image_url"}


class UserService:
    """Business logic for the signed-in user's own account"""

    @staticmethod
    def update_profile(db: Session, user: User, payload: UserUpdate) -> User:
        """Apply only the fields present in the payload."""
        changes = {
            key: value
            for key, value in payload.model_dump(mode="json", exclude_unset=True).items()
            if value is not None or key in CLEARABLE_FIELDS
        }
        if not changes:
            return user
        user = UserRepository(db).update_user(user, **changes)
        logger.info(
            f"user_updated user_id={user.id} fields={','.join(sorted(changes))}"
        )
        return user

    @staticmethod
    def change_password(
        db: Session, user: User, payload: PasswordChangeRequest
    ) -> None:
        if not verify_password(payload.current_password, user.password_hash):
            logger.warning(f"password_change_rejected user_id={user.id}")
            raise UnauthorizedError(
                "Current password is incorrect", code="INVALID_CREDENTIALS"
            )
        UserRepository(db).update_user(
            user, password_hash=hash_password(payload.new_password)
        )
        logger.info(f"password_changed user_id={user.id}")

    @staticmethod
    def delete_user(db: Session, user: User) -> None:
        """Delete the account; ORM cascades remove plans, progress, favorites and feedback."""
        user_id = user.id
        db.delete(user)
        db.commit()
        logger.info(f"user_deleted user_id={user_id}")
