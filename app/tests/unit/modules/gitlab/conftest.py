"""Fixtures for gitlab module tests."""

from unittest.mock import MagicMock

import pytest

from integrations.gitlab import RepoLocation
from modules.gitlab.group_user import create_gitlab_group_user_action


@pytest.fixture
def client_factory(mock_gitlab_client):
    """Client factory double returning mock_gitlab_client."""
    return MagicMock(return_value=mock_gitlab_client)


@pytest.fixture
def repo_url_parser():
    """Repo url parser double resolving every url to gitlab.com."""
    return MagicMock(
        return_value=RepoLocation(host="gitlab.com", owner="owner", repo="repo")
    )


@pytest.fixture
def group_user_action(scm_integrations, client_factory, repo_url_parser):
    """gitlab:group:user action wired to test doubles."""
    return create_gitlab_group_user_action(
        integrations=scm_integrations,
        client_factory=client_factory,
        repo_url_parser=repo_url_parser,
    )
