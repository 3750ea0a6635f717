# backend/securechat/services/calls.py
import logging
from typing import Dict

from fastapi import WebSocket, WebSocketDisconnect

from securechat.schemas.call import CallSignal

logger = logging.getLogger(__name__)


class CallRelay:
    """
    Routes WebRTC signalling messages to the receiver's open socket.
    One socket per user, the latest connection wins. Nothing is queued
    for offline receivers.
    """

    def __init__(self):
        self.connections: Dict[int, WebSocket] = {}

    def connect(self, user_id: int, websocket: WebSocket):
        if user_id in self.connections:
            logger.info("User %s reconnected, replacing previous call socket", user_id)
        self.connections[user_id] = websocket
        logger.info("User %s joined call signalling", user_id)

    def disconnect(self, user_id: int, websocket: WebSocket):
        if self.connections.get(user_id) is websocket:
            del self.connections[user_id]
            logger.info("User %s left call signalling", user_id)

    def is_online(self, user_id: int) -> bool:
        return user_id in self.connections

    async def relay(self, signal: CallSignal) -> bool:
        """Forward signal to its receiver. Returns False if the receiver is offline."""
        websocket = self.connections.get(signal.receiver_id)
        if websocket is None:
            logger.info(
                "Dropped %s from %s: receiver %s offline",
                signal.type.value, signal.caller_id, signal.receiver_id,
            )
            return False

        try:
            await websocket.send_json(signal.model_dump(mode="json"))
        except (WebSocketDisconnect, RuntimeError):
            logger.info("Receiver %s went away during relay", signal.receiver_id)
            self.disconnect(signal.receiver_id, websocket)
            return False

        logger.debug("Relayed %s %s -> %s", signal.type.value, signal.caller_id, signal.receiver_id)
        return True


call_relay = CallRelay()
