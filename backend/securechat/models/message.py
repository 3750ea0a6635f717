# backend/securechat/models/message.py
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from securechat.db.base import Base


class Message(Base):
    """
    A direct message between two users.

    sender_id / receiver_id are plain integers: the pipeline does not check
    that the referenced users exist.
    delivered is set on creation and never reset, read only ever goes
    False -> True, content and toxic are written once.
    """
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(primary_key=True)

    sender_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    receiver_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)

    content: Mapped[str | None] = mapped_column(Text, nullable=True)

    delivered: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    toxic: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Message {self.id} {self.sender_id}->{self.receiver_id} read={self.read} toxic={self.toxic}>"
