# backend/securechat/api/routes/messages.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from securechat.api.deps import get_message_service
from securechat.core.security import get_current_user
from securechat.models.user import User
from securechat.schemas.common import ApiResponse
from securechat.schemas.message import MessageSendRequest, MessageOut
from securechat.services.messages import MessageService


router = APIRouter(prefix='/messages', tags=['messages'])


@router.post('/send', response_model=ApiResponse[MessageOut])
def send_message(
    req: MessageSendRequest,
    service: MessageService = Depends(get_message_service),
    current_user: User = Depends(get_current_user),
):
    msg = service.send_message(current_user.id, req.receiver_id, req.content)
    return ApiResponse[MessageOut].ok('Message sent successfully', MessageOut.model_validate(msg))


@router.get('/receiver/{receiver_id}', response_model=ApiResponse[List[MessageOut]])
def get_messages_by_receiver(
    receiver_id: int,
    service: MessageService = Depends(get_message_service),
    current_user: User = Depends(get_current_user),
):
    """Offline inbox: every message addressed to receiver_id."""
    messages = service.get_messages_by_receiver(receiver_id)
    return ApiResponse[List[MessageOut]].ok(
        'Messages retrieved successfully',
        [MessageOut.model_validate(m) for m in messages],
    )


@router.put('/read/{message_id}', response_model=ApiResponse[MessageOut])
def mark_read(
    message_id: int,
    service: MessageService = Depends(get_message_service),
    current_user: User = Depends(get_current_user),
):
    msg = service.mark_read(message_id)
    return ApiResponse[MessageOut].ok('Message marked as read', MessageOut.model_validate(msg))
