"""
Keyword based toxicity flagging.

Matching is a case-insensitive substring search, not a tokenizer: "hateful"
and "whatever" both contain "hate" and are flagged. Anything exposing
is_toxic(text) -> bool can replace ToxicityClassifier in MessageService.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from securechat.core.config import settings

DEFAULT_KEYWORDS: Tuple[str, ...] = ("hate", "kill", "stupid", "idiot", "abuse")


class ToxicityClassifier:

    def __init__(self, keywords: Optional[Iterable[str]] = None):
        source = DEFAULT_KEYWORDS if keywords is None else keywords
        # empty strings would match every text
        self.keywords: Tuple[str, ...] = tuple(
            dict.fromkeys(k.strip().lower() for k in source if k and k.strip())
        )

    def is_toxic(self, text: Optional[str]) -> bool:
        """Return True if any flagged keyword appears anywhere in text."""
        if not text:
            return False
        lowered = text.lower()
        return any(word in lowered for word in self.keywords)


def get_classifier() -> ToxicityClassifier:
    """FastAPI dependency: classifier built from the configured keyword list."""
    return ToxicityClassifier(settings.toxic_keywords)
