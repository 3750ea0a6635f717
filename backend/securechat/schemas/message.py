from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from securechat.schemas.common import as_utc
from securechat.security.sanitizer import InputSanitizer


class MessageSendRequest(BaseModel):
    """Sender is taken from the access token, not from the body."""
    model_config = ConfigDict(extra='forbid')

    receiver_id: int = Field(..., ge=1)
    content: Optional[str] = Field(default=None, description='Message text (max 5000 chars)')

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return InputSanitizer.sanitize_content(v)


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    receiver_id: int
    content: Optional[str] = None
    delivered: bool
    read: bool
    toxic: bool
    created_at: datetime

    @field_validator('created_at')
    @classmethod
    def normalise_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)
