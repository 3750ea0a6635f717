# backend/securechat/crud/users.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from securechat.core.security import hash_password
from securechat.models.user import User, UserStatus


def get_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == email)
    return db.execute(stmt).scalar_one_or_none()


def get_by_username(db: Session, username: str) -> User | None:
    stmt = select(User).where(User.username == username)
    return db.execute(stmt).scalar_one_or_none()


def create_user(db: Session, username: str, email: str, password: str) -> User:
    u = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        status=UserStatus.OFFLINE.value,
    )

    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def save(db: Session, user: User) -> User:
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
