# backend/securechat/api/routes/calls.py
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from securechat.core.security import user_id_from_token
from securechat.db.session import get_db
from securechat.models.user import User
from securechat.schemas.call import CallSignal
from securechat.services.calls import call_relay

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calls"])


def _user_exists(db: Session, user_id: int) -> bool:
    # The session is only needed for this lookup; closing it returns the
    # connection to the pool before the socket starts its long wait.
    try:
        return db.get(User, user_id) is not None
    finally:
        db.close()


@router.websocket("/ws/call/{user_id}")
async def call_signalling(
    websocket: WebSocket,
    user_id: int,
    access_token: str,
    db: Session = Depends(get_db),
):
    """
    WebRTC signalling relay.

    The client sends CallSignal JSON ({receiver_id, type, payload}); the
    server stamps caller_id and forwards it to the receiver's socket.
    """
    if user_id_from_token(access_token) != user_id:
        logger.info("Rejected call socket for user %s: bad token", user_id)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        exists = await run_in_threadpool(_user_exists, db, user_id)
    except SQLAlchemyError as e:
        logger.error("Store failure opening call socket for user %s: %s", user_id, e)
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    if not exists:
        logger.info("Rejected call socket for user %s: unknown user", user_id)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    call_relay.connect(user_id, websocket)

    try:
        while True:
            data = await websocket.receive_json()
            try:
                signal = CallSignal.model_validate(data)
            except ValidationError:
                await websocket.send_json({"event": "error", "detail": "Invalid call signal"})
                continue

            signal.caller_id = user_id
            if not await call_relay.relay(signal):
                await websocket.send_json({"event": "error", "detail": "Receiver offline"})
    except WebSocketDisconnect:
        pass
    finally:
        call_relay.disconnect(user_id, websocket)
