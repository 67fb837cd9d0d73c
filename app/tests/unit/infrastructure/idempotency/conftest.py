"""Fixtures for checkpoint cache tests."""

from types import SimpleNamespace

import pytest

from infrastructure.idempotency.memory import InMemoryIdempotencyCache


@pytest.fixture
def checkpoint_entry():
    """Checkpoint entry as stored by ActionContext.checkpoint."""
    return {"result": {"id": 456, "access_level": 30}}


@pytest.fixture
def memory_cache():
    """In-memory cache with a short TTL."""
    return InMemoryIdempotencyCache(ttl_seconds=60)


@pytest.fixture
def frozen_time(monkeypatch):
    """Controllable clock for the in-memory cache."""

    class Clock:
        now = 1_000_000.0

        def advance(self, seconds):
            self.now += seconds

    clock = Clock()
    monkeypatch.setattr(
        "infrastructure.idempotency.memory.time",
        SimpleNamespace(monotonic=lambda: clock.now),
    )
    return clock
