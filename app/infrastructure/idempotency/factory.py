"""Process-wide checkpoint store."""

from typing import Optional

from infrastructure.idempotency.cache import IdempotencyCache
from infrastructure.idempotency.memory import InMemoryIdempotencyCache
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

_cache_instance: Optional[IdempotencyCache] = None


def get_cache() -> IdempotencyCache:
    """Return the shared checkpoint store, creating it on first use.

    Retention comes from settings.idempotency.IDEMPOTENCY_TTL_SECONDS.
    """
    global _cache_instance

    if _cache_instance is None:
        ttl_seconds = get_settings().idempotency.IDEMPOTENCY_TTL_SECONDS
        _cache_instance = InMemoryIdempotencyCache(ttl_seconds=ttl_seconds)
        logger.info("checkpoint_store_initialized", ttl_seconds=ttl_seconds)

    return _cache_instance


def reset_cache() -> None:
    """Forget the shared store. Tests only."""
    global _cache_instance
    _cache_instance = None
