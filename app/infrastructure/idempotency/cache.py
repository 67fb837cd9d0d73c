"""Checkpoint store interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IdempotencyCache(ABC):
    """Store of completed checkpoints.

    Entries are small JSON-like dicts (``{"result": ...}``) keyed by
    ``"<task_id>:<checkpoint key>"``. A present entry means the side effect
    behind the key already happened for that task; an entry must never be
    written for a side effect that failed.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the entry for key, or None if absent or expired."""

    @abstractmethod
    def set(
        self, key: str, response: Dict[str, Any], ttl_seconds: Optional[int] = None
    ) -> None:
        """Store an entry.

        Args:
            key: Task-scoped checkpoint key
            response: Entry to store
            ttl_seconds: Retention; the store's default when None
        """

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Return backend-specific statistics (entry counts, TTL)."""
