"""Shared fixtures for the test suite."""

from unittest.mock import MagicMock

import pytest

from infrastructure.idempotency import InMemoryIdempotencyCache, reset_cache
from infrastructure.services.providers import get_settings, get_scm_integrations
from integrations.gitlab import GitlabIntegrationConfig, ScmIntegrations


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings, integrations and the checkpoint cache between tests."""
    get_settings.cache_clear()
    get_scm_integrations.cache_clear()
    reset_cache()
    yield
    get_settings.cache_clear()
    get_scm_integrations.cache_clear()
    reset_cache()


@pytest.fixture
def checkpoint_cache():
    """Fresh in-memory checkpoint store."""
    return InMemoryIdempotencyCache(ttl_seconds=600)


@pytest.fixture
def scm_integrations():
    """Integrations with a tokened gitlab.com and a tokenless self-hosted host."""
    return ScmIntegrations(
        [
            GitlabIntegrationConfig(
                host="gitlab.com",
                api_base_url="https://gitlab.com/api/v4",
                base_url="https://gitlab.com",
                token="tokenlols",
            ),
            GitlabIntegrationConfig(
                host="gitlab.example.org",
                api_base_url="https://gitlab.example.org/api/v4",
                base_url="https://gitlab.example.org",
            ),
        ]
    )


@pytest.fixture
def mock_gitlab_client():
    """GitLab client double exposing group_members.add/remove."""
    client = MagicMock()
    client.group_members.add.side_effect = (
        lambda group_id, user_id, access_level: {
            "id": user_id,
            "group_id": group_id,
            "access_level": access_level,
        }
    )
    client.group_members.remove.return_value = None
    return client
