"""Idempotency infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import ComponentSettings


class IdempotencySettings(ComponentSettings):
    """Checkpoint cache configuration for at-most-once action sub-steps.

    Environment Variables:
        IDEMPOTENCY_TTL_SECONDS: How long a completed checkpoint is remembered
            (default: 86400s = 24h). Retries of a task after this window
            re-run their sub-steps.

    Example:
        ```python
        from infrastructure.services import get_settings

        ttl = get_settings().idempotency.IDEMPOTENCY_TTL_SECONDS
        ```
    """

    IDEMPOTENCY_TTL_SECONDS: int = Field(default=86400, alias="IDEMPOTENCY_TTL_SECONDS")
