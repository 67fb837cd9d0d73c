"""Parsing of scaffolder repository locations."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from infrastructure.scaffolder.errors import InputError
from integrations.gitlab.integrations import ScmIntegrations


@dataclass(frozen=True)
class RepoLocation:
    """Location addressed by a repoUrl such as 'gitlab.com?repo=app&owner=team'."""

    host: str
    owner: Optional[str] = None
    repo: Optional[str] = None


def _first(query: dict, name: str) -> Optional[str]:
    values = query.get(name)
    return values[0] if values else None


def parse_repo_url(repo_url: str, integrations: ScmIntegrations) -> RepoLocation:
    """Parse a repoUrl of the form ``host?repo=<name>&owner=<group-or-user>``.

    Args:
        repo_url: Repository location as written in a template
        integrations: Configured GitLab integrations

    Returns:
        RepoLocation with the host and optional owner/repo

    Raises:
        InputError: If the url cannot be parsed or no integration matches its host
    """
    try:
        parsed = urlsplit(f"https://{(repo_url or '').strip()}")
        host = parsed.netloc.lower()
    except ValueError as e:
        raise InputError(
            f"Invalid repo URL passed to publisher, got {repo_url}, {e}"
        ) from e

    if not host:
        raise InputError(f"Invalid repo URL passed to publisher, got {repo_url}")

    if integrations.by_host(host) is None:
        raise InputError(
            f"No matching integration configuration for host {host}, "
            "please check your integrations config"
        )

    query = parse_qs(parsed.query)
    return RepoLocation(
        host=host, owner=_first(query, "owner"), repo=_first(query, "repo")
    )
