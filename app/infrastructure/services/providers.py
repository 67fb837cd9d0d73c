"""Application-scoped providers.

Each provider is cached with ``lru_cache`` so the whole process shares one
instance. Tests reset them with ``get_settings.cache_clear()`` and
``get_scm_integrations.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from infrastructure.configuration import Settings

if TYPE_CHECKING:
    from integrations.gitlab.integrations import ScmIntegrations


@lru_cache
def get_settings() -> Settings:
    """Return the settings loaded from the environment and ``.env``."""
    return Settings()


@lru_cache
def get_scm_integrations() -> "ScmIntegrations":
    """Return the GitLab integrations configured in settings.gitlab.

        integrations = get_scm_integrations()
        config = integrations.by_host("gitlab.com")
    """
    # integrations.gitlab imports from infrastructure at module level
    from integrations.gitlab.integrations import ScmIntegrations

    return ScmIntegrations.from_settings(get_settings())
