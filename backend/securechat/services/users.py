# backend/securechat/services/users.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from securechat.core.exceptions import UserNotFound
from securechat.crud import users as users_crud
from securechat.models.user import User, UserStatus

logger = logging.getLogger(__name__)


class UsernameTaken(ValueError):
    pass


class UserService:
    """Profile lookups and updates."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User:
        user = users_crud.get_by_id(self.db, user_id)
        if user is None:
            raise UserNotFound()
        return user

    def update_username(self, user_id: int, username: str) -> User:
        user = self.get_user(user_id)
        if username == user.username:
            return user

        if users_crud.get_by_username(self.db, username):
            raise UsernameTaken("Username already taken")

        user.username = username
        logger.info("User %s renamed to %s", user_id, username)
        return users_crud.save(self.db, user)

    def update_status(self, user_id: int, status: UserStatus) -> User:
        user = self.get_user(user_id)
        user.status = UserStatus(status).value
        return users_crud.save(self.db, user)
