# backend/securechat/api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from securechat.crud.messages import MessageRepository
from securechat.db.session import get_db
from securechat.services.messages import MessageService
from securechat.services.toxicity import ToxicityClassifier, get_classifier
from securechat.services.users import UserService


def get_message_service(
    db: Session = Depends(get_db),
    classifier: ToxicityClassifier = Depends(get_classifier),
) -> MessageService:
    return MessageService(MessageRepository(db), classifier)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)
