"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator, model_validator

from planner.config import get_settings
from planner.domain.schemas.base import APIModel

settings = get_settings()


def _check_email(value: str) -> str:
    # Validate syntax only; the address is stored exactly as given.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("Invalid email address") from exc
    return value


class RegisterRequest(APIModel):
    email: str
    password: str
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=200)

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, value: str) -> str:
        if len(value) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")
        return value


class LoginRequest(APIModel):
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: str) -> str:
        return _check_email(value)


class ProfileUpdate(APIModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    profile_image_url: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def not_empty(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class UserRead(APIModel):
    """Public view of a user. There is deliberately no password field."""

    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(APIModel):
    message: str
    user: UserRead


class MessageResponse(APIModel):
    message: str
