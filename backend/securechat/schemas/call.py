from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CallSignalType(str, enum.Enum):
    OFFER = "OFFER"
    ANSWER = "ANSWER"
    ICE = "ICE"


class CallSignal(BaseModel):
    """
    WebRTC signalling envelope relayed between two users.
    payload is opaque to the server (SDP or ICE candidate).
    """
    model_config = ConfigDict(extra='forbid')

    caller_id: Optional[int] = None
    receiver_id: int = Field(..., ge=1)
    type: CallSignalType
    payload: Optional[Any] = None
