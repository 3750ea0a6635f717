"""
Rate limiting for login attempts.
Failed attempts per key (email) trigger exponential backoff.
"""
import logging
import time
from threading import Lock

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Simple in-memory rate limiter with exponential backoff.

    Only keys with failed attempts are tracked. The failure count survives
    an expired lockout, so every further failure doubles the delay; it is
    cleared by a success or once the key has been quiet for 2 * max_delay.
    """

    def __init__(self, max_attempts: int = 5, base_delay: float = 2.0, max_delay: float = 300.0):
        self._attempts = {}
        self._lock = Lock()

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay

    def _required_delay(self, count: int) -> float:
        return min(self.base_delay * (2 ** (count - self.max_attempts)), self.max_delay)

    def _is_stale(self, entry: dict, now: float) -> bool:
        return now - entry["last_time"] > self.max_delay * 2

    def _purge_stale(self, now: float) -> None:
        for key in [k for k, e in self._attempts.items() if self._is_stale(e, now)]:
            del self._attempts[key]

    def is_allowed(self, key: str) -> bool:
        """
        Check if an attempt is allowed for this key.
        Returns False while a backoff period is active.
        """
        with self._lock:
            entry = self._attempts.get(key)
            if entry is None:
                return True

            now = time.time()
            if self._is_stale(entry, now):
                del self._attempts[key]
                return True

            if entry["count"] >= self.max_attempts:
                return now - entry["last_time"] >= self._required_delay(entry["count"])

            return True

    def record_attempt(self, key: str, success: bool = False) -> None:
        """Record an attempt (failed by default). Success forgets the key."""
        with self._lock:
            now = time.time()

            if success:
                self._attempts.pop(key, None)
                return

            self._purge_stale(now)
            entry = self._attempts.setdefault(key, {"count": 0, "last_time": now})
            entry["last_time"] = now
            entry["count"] += 1
            if entry["count"] >= self.max_attempts:
                logger.warning(
                    "Rate limit engaged for %s (%.0fs)", key, self._required_delay(entry["count"])
                )

    def get_retry_after(self, key: str) -> float:
        """Seconds to wait before next attempt, 0 if allowed."""
        with self._lock:
            entry = self._attempts.get(key)
            if entry is None or entry["count"] < self.max_attempts:
                return 0.0
            elapsed = time.time() - entry["last_time"]
            return max(0.0, self._required_delay(entry["count"]) - elapsed)

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._attempts)

    def reset(self) -> None:
        with self._lock:
            self._attempts.clear()


# Global instance
_limiter = RateLimiter()


def is_rate_limited(key: str) -> bool:
    """Check if a request should be rate limited."""
    return not _limiter.is_allowed(key)


def record_auth_attempt(key: str, success: bool = False) -> None:
    """Record an auth attempt."""
    _limiter.record_attempt(key, success=success)


def get_rate_limit_delay(key: str) -> float:
    """Get time to wait in seconds."""
    return _limiter.get_retry_after(key)


def reset_rate_limits() -> None:
    _limiter.reset()
