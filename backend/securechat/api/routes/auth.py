# backend/securechat/api/routes/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from securechat.db.session import get_db
from securechat.schemas.auth import RegisterIn, LoginIn, TokenOut
from securechat.schemas.common import ApiResponse
from securechat.schemas.user import UserOut
from securechat.crud.users import (
    get_by_email as get_user_by_email,
    get_by_username as get_user_by_username,
    create_user,
    save as save_user,
)
from securechat.core.security import (
    verify_password,
    create_access_token,
    get_current_user,
)
from securechat.models.user import User, UserStatus
from securechat.security.rate_limit import is_rate_limited, record_auth_attempt, get_rate_limit_delay
from securechat.security.password_strength import validate_password_strength

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[UserOut])
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    is_valid, error_msg = validate_password_strength(payload.password)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_msg)

    if get_user_by_email(db, payload.email):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")
    if get_user_by_username(db, payload.username):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken")

    u = create_user(db, payload.username, payload.email, payload.password)
    logger.info("Registered user %s (%s)", u.id, u.username)
    return ApiResponse[UserOut].ok("User registered successfully", UserOut.model_validate(u))


@router.post("/login", response_model=ApiResponse[TokenOut])
def login(payload: LoginIn, db: Session = Depends(get_db)):
    if is_rate_limited(payload.email):
        delay = get_rate_limit_delay(payload.email)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many login attempts. Try again in {int(delay)} seconds."
        )

    u = get_user_by_email(db, payload.email)
    if not u or not verify_password(payload.password, u.password_hash):
        record_auth_attempt(payload.email, success=False)
        logger.info("Failed login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    record_auth_attempt(payload.email, success=True)

    u.status = UserStatus.ONLINE.value
    save_user(db, u)
    logger.info("User %s logged in", u.id)

    token = TokenOut(
        access_token=create_access_token(subject=str(u.id)),
        user_id=u.id,
        email=u.email,
    )
    return ApiResponse[TokenOut].ok("Login successful", token)


@router.post("/logout", response_model=ApiResponse[UserOut])
def logout(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark the caller OFFLINE. Tokens stay valid until they expire."""
    current_user.status = UserStatus.OFFLINE.value
    save_user(db, current_user)
    logger.info("User %s logged out", current_user.id)
    return ApiResponse[UserOut].ok("Logged out successfully", UserOut.model_validate(current_user))
