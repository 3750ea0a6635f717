# backend/securechat/services/messages.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from securechat.core.exceptions import MessageNotFound
from securechat.crud.messages import MessageRepository
from securechat.models.message import Message
from securechat.services.toxicity import ToxicityClassifier

logger = logging.getLogger(__name__)


class MessageService:
    """
    Send / receive / read-status pipeline for direct messages.

    Every operation is a single synchronous round trip to the repository.
    Store errors propagate to the caller unchanged; nothing is retried.
    """

    def __init__(self, repo: MessageRepository, classifier: ToxicityClassifier):
        self.repo = repo
        self.classifier = classifier

    def send_message(self, sender_id: int, receiver_id: int, content: Optional[str]) -> Message:
        """
        Classify, stamp and persist a new message.

        Args:
            sender_id: ID of the sending user.
            receiver_id: ID of the receiving user (not checked for existence).
            content: Message text, may be None.

        Returns:
            The persisted Message, including its store-assigned id.
        """
        toxic = self.classifier.is_toxic(content)
        message = Message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            delivered=True,
            read=False,
            toxic=toxic,
            created_at=datetime.now(timezone.utc),
        )
        saved = self.repo.save(message)

        if toxic:
            logger.warning("Message %s from user %s flagged as toxic", saved.id, sender_id)
        logger.info("Message %s sent %s -> %s", saved.id, sender_id, receiver_id)
        return saved

    def get_messages_by_receiver(self, receiver_id: int) -> List[Message]:
        """All messages addressed to receiver_id, in store order."""
        return self.repo.find_by_receiver_id(receiver_id)

    def mark_read(self, message_id: int) -> Message:
        # Plain read-modify-write: concurrent callers race and the last
        # write wins. Both only ever set read=True.
        message = self.repo.find_by_id(message_id)
        if message is None:
            logger.info("mark_read: message %s not found", message_id)
            raise MessageNotFound()

        message.read = True
        return self.repo.save(message)
