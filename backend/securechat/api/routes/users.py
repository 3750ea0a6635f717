# backend/securechat/api/routes/users.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from securechat.api.deps import get_user_service
from securechat.core.security import get_current_user
from securechat.models.user import User, UserStatus
from securechat.schemas.common import ApiResponse
from securechat.schemas.user import UserOut, UsernameUpdate
from securechat.services.users import UserService, UsernameTaken

router = APIRouter(prefix="/users", tags=["users"])


def _require_self(user_id: int, current_user: User) -> None:
    if user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Cannot modify another user")


@router.get("/{user_id}", response_model=ApiResponse[UserOut])
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    user = service.get_user(user_id)
    return ApiResponse[UserOut].ok("User retrieved successfully", UserOut.model_validate(user))


@router.put("/{user_id}", response_model=ApiResponse[UserOut])
def update_username(
    user_id: int,
    payload: UsernameUpdate,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    _require_self(user_id, current_user)
    try:
        user = service.update_username(user_id, payload.username)
    except UsernameTaken as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ApiResponse[UserOut].ok("Username updated successfully", UserOut.model_validate(user))


@router.put("/{user_id}/status", response_model=ApiResponse[UserOut])
def update_status(
    user_id: int,
    status: UserStatus,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    _require_self(user_id, current_user)
    user = service.update_status(user_id, status)
    return ApiResponse[UserOut].ok("Status updated successfully", UserOut.model_validate(user))


@router.get("/{user_id}/status", response_model=ApiResponse[UserStatus])
def get_status(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    user = service.get_user(user_id)
    return ApiResponse[UserStatus].ok("Status retrieved successfully", UserStatus(user.status))
