from __future__ import annotations

from pydantic import BaseModel, Field, EmailStr, field_validator, ConfigDict
from securechat.security.sanitizer import InputSanitizer


class RegisterIn(BaseModel):
    """Registration request. Password strength is checked in the route."""
    model_config = ConfigDict(extra='forbid')

    username: str = Field(
        min_length=3,
        max_length=64,
        description="Username (3-64 alphanumeric/dash/underscore)"
    )
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        return InputSanitizer.sanitize_username(v)


class LoginIn(BaseModel):
    model_config = ConfigDict(extra='forbid')

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)

    @field_validator('password')
    @classmethod
    def validate_password_not_empty(cls, v: str) -> str:
        """Ensure password is not whitespace-only."""
        if not v.strip():
            raise ValueError('Password cannot be empty')
        return v


class TokenOut(BaseModel):
    model_config = ConfigDict(extra='forbid')

    access_token: str
    token_type: str = "bearer"
    user_id: int
    email: str
