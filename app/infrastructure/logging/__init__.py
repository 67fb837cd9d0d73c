"""Structured logging with structlog.

    from infrastructure.logging import bind_task_context, get_module_logger

    logger = get_module_logger()

    with bind_task_context(task_id, action_id="gitlab:group:user"):
        logger.info("adding_users_to_group", group_id=123)
"""

from infrastructure.logging.context import (
    bind_task_context,
    clear_task_context,
    get_correlation_id,
)
from infrastructure.logging.formatters import (
    GITLAB_TOKEN_RE,
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_task_context",
    "clear_task_context",
    "get_correlation_id",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
    "GITLAB_TOKEN_RE",
]
