"""GitLab integration package."""

from .client import GitlabClient, GroupMembers, get_client
from .integrations import GitlabIntegrationConfig, ScmIntegrations
from .repo_url import RepoLocation, parse_repo_url

__all__ = [
    "GitlabClient",
    "GroupMembers",
    "get_client",
    "GitlabIntegrationConfig",
    "ScmIntegrations",
    "RepoLocation",
    "parse_repo_url",
]
