# backend/securechat/db/init_db.py
import logging

from securechat.db.base import Base
from securechat.db.session import engine

# models must be imported so their tables are registered on Base.metadata
from securechat import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", engine.url.render_as_string(hide_password=True))
