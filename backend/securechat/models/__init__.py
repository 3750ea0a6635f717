# backend/securechat/models/__init__.py
from .user import User, UserStatus
from .message import Message

__all__ = ["User", "UserStatus", "Message"]
