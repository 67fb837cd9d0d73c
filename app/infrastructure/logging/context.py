"""Task-scoped logging context.

Every entry logged while an action runs carries the task id as
``correlation_id`` together with the action and step ids, so the lines of
one task (and of its retries) can be grouped.

    with bind_task_context(task_id, action_id="gitlab:group:user"):
        logger.info("adding_users_to_group")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_task_context(task_id: Optional[str] = None, **extra: Any) -> Iterator[str]:
    """Bind task context to structlog's contextvars for the duration of the block.

    Args:
        task_id: Task identifier, bound as ``correlation_id``. A random id
            is used when omitted.
        **extra: Additional context. Keys whose value is None are skipped.

    Yields:
        The bound correlation id.
    """
    correlation_id = task_id or str(uuid.uuid4())
    bound = {"correlation_id": correlation_id}
    bound.update((key, value) for key, value in extra.items() if value is not None)

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield correlation_id
    finally:
        structlog.contextvars.unbind_contextvars(*bound)


def get_correlation_id() -> Optional[str]:
    """Return the correlation id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_task_context() -> None:
    """Drop everything bound to the current logging context."""
    structlog.contextvars.clear_contextvars()
