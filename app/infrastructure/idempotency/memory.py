"""In-memory checkpoint store with per-entry expiry."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from infrastructure.idempotency.cache import IdempotencyCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class _Entry:
    response: Dict[str, Any]
    expires_at: float

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemoryIdempotencyCache(IdempotencyCache):
    """Checkpoint store held in process memory.

    Retries of a task must run in the same worker process to see its
    checkpoints; entries do not survive a restart. Expired entries are
    dropped on read, and in bulk every cleanup_interval writes or by
    cleanup_expired_entries().
    """

    def __init__(self, ttl_seconds: int = 3600, cleanup_interval: int = 500):
        self.ttl_seconds = ttl_seconds
        self.cleanup_interval = cleanup_interval
        self._writes = 0
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.expired(now):
                del self._entries[key]
                entry = None

        if entry is None:
            logger.debug("checkpoint_store_miss", key=key)
            return None
        return entry.response

    def set(
        self, key: str, response: Dict[str, Any], ttl_seconds: Optional[int] = None
    ) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            self._entries[key] = _Entry(response, time.monotonic() + ttl)
            self._writes += 1
            size = len(self._entries)
            due = self.cleanup_interval > 0 and self._writes % self.cleanup_interval == 0
        logger.debug("checkpoint_store_set", key=key, ttl_seconds=ttl, size=size)
        if due:
            self.cleanup_expired_entries()

    def cleanup_expired_entries(self) -> int:
        """Drop every expired entry and return how many were removed."""
        now = time.monotonic()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.expired(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("checkpoint_store_cleanup", removed=len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        now = time.monotonic()
        with self._lock:
            total = len(self._entries)
            expired = sum(entry.expired(now) for entry in self._entries.values())
        return {
            "backend": "memory",
            "ttl_seconds": self.ttl_seconds,
            "total_entries": total,
            "expired_entries": expired,
            "active_entries": total - expired,
        }
