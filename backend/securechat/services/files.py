# backend/securechat/services/files.py
from __future__ import annotations

import logging
from pathlib import Path

from securechat.core.config import settings
from securechat.security.sanitizer import InputSanitizer

logger = logging.getLogger(__name__)


class FileTooLarge(ValueError):
    pass


def store_upload(filename: str | None, content: bytes) -> Path:
    """
    Write an uploaded file under settings.upload_dir.

    The filename is reduced to a safe basename; an existing file with the
    same name is overwritten.

    Raises:
        ValueError: If the filename is unusable
        FileTooLarge: If content exceeds settings.max_upload_bytes
    """
    safe_name = InputSanitizer.sanitize_filename(filename or "")

    if len(content) > settings.max_upload_bytes:
        raise FileTooLarge(f"File too large (max {settings.max_upload_bytes} bytes)")

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    target = upload_dir / safe_name
    target.write_bytes(content)

    logger.info("Stored upload %s (%d bytes)", target, len(content))
    return target
