"""Infrastructure idempotency cache.

Remembers completed checkpoints so a retried task does not re-apply side
effects it already performed.

Usage:

    from infrastructure.idempotency import get_cache

    cache = get_cache()

    cached = cache.get(key)
    if cached is None:
        result = execute_operation(...)
        cache.set(key, {"result": result})
"""

from infrastructure.idempotency.cache import IdempotencyCache
from infrastructure.idempotency.factory import get_cache, reset_cache
from infrastructure.idempotency.key_builder import CheckpointKeyBuilder
from infrastructure.idempotency.memory import InMemoryIdempotencyCache

__all__ = [
    "IdempotencyCache",
    "get_cache",
    "reset_cache",
    "CheckpointKeyBuilder",
    "InMemoryIdempotencyCache",
]
