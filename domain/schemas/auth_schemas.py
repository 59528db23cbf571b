from pydantic import BaseModel, EmailStr, Field, field_validator

from domain.schemas.user_schemas import UserCreateFields, UserResponse


class RegisterRequest(UserCreateFields):
    """Registration payload: profile fields plus a password"""

    password: str = Field(..., min_length=8, max_length=50)

    model_config = {"extra": "forbid"}


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
