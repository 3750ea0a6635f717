# backend/securechat/crud/messages.py
from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from securechat.models.message import Message


class MessageRepository:
    """
    Persistence for Message rows, bound to one request-scoped Session.

    save() commits immediately and refreshes the instance, so the returned
    record carries any store-assigned fields (id).
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, message: Message) -> Message:
        self.db.add(message)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(message)
        return message

    def find_by_id(self, message_id: int) -> Message | None:
        return self.db.get(Message, message_id)

    def find_by_receiver_id(self, receiver_id: int) -> List[Message]:
        stmt = select(Message).where(Message.receiver_id == receiver_id)
        return list(self.db.execute(stmt).scalars().all())
