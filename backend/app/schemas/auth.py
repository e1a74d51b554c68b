"""Authentication schemas."""
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.schemas.user import HealthProfile, Preferences, UserResponse


class UserSignup(BaseModel):
    """User signup request."""

    name: str | None = Field(None, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    health_profile: HealthProfile | None = None
    preferences: Preferences | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserLogin(BaseModel):
    """User login request.

    The email is not format-checked so that a malformed address fails the
    same way as an unknown one.
    """

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class AuthResponse(BaseModel):
    """Signup/login response: the user plus a bearer token."""

    user: UserResponse
    token: str
    token_type: str = "bearer"
