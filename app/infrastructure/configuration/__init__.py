"""Configuration for the scaffolder actions.

Settings are read from the environment (and ``.env``) with pydantic-settings
and grouped into one section per component. Use the cached provider rather
than instantiating ``Settings`` directly:

    from infrastructure.services import get_settings

    settings = get_settings()
    hosts = [entry["host"] for entry in settings.gitlab.integrations]
    ttl = settings.idempotency.IDEMPOTENCY_TTL_SECONDS
"""

from infrastructure.configuration.gitlab import GitlabSettings
from infrastructure.configuration.idempotency import IdempotencySettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "GitlabSettings", "IdempotencySettings"]
