from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from securechat.models.user import UserStatus
from securechat.schemas.common import as_utc
from securechat.security.sanitizer import InputSanitizer


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    status: UserStatus
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalise_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)


class UsernameUpdate(BaseModel):
    model_config = ConfigDict(extra='forbid')

    username: str = Field(min_length=3, max_length=64)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        return InputSanitizer.sanitize_username(v)
