"""GitLab REST API client.

Covers only the endpoints the scaffolder actions call. Every request raises
requests.HTTPError on a non-2xx response; errors are not translated.
"""

from typing import Any, Dict, Optional

import requests

from infrastructure.logging import get_module_logger
from infrastructure.scaffolder.errors import InputError
from integrations.gitlab.integrations import ScmIntegrations

logger = get_module_logger()

USER_AGENT = "gitlab-scaffolder-actions/1.0"


class GroupMembers:
    """Group membership endpoints (``/groups/:id/members``)."""

    def __init__(self, client: "GitlabClient"):
        self._client = client

    def add(self, group_id: int, user_id: int, access_level: int) -> Dict[str, Any]:
        """Add a user to a group.

        Returns:
            The member record created by GitLab
        """
        return self._client.request(
            "POST",
            f"/groups/{group_id}/members",
            json={"user_id": user_id, "access_level": int(access_level)},
        )

    def remove(self, group_id: int, user_id: int) -> None:
        """Remove a user from a group."""
        self._client.request("DELETE", f"/groups/{group_id}/members/{user_id}")


class GitlabClient:
    """Minimal GitLab API v4 client.

    Attributes:
        api_base_url: REST API root (e.g. https://gitlab.com/api/v4)
        timeout: Timeout applied to every request, in seconds
        group_members: Group membership endpoints
    """

    def __init__(
        self,
        api_base_url: str,
        token: str,
        oauth: bool = False,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize client.

        Args:
            api_base_url: REST API root
            token: Access token
            oauth: Send token as an OAuth bearer instead of a PRIVATE-TOKEN
            timeout: Request timeout in seconds
            session: Optional pre-built session (tests)
        """
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {"User-Agent": USER_AGENT, "Accept": "application/json"}
        )
        if oauth:
            self._session.headers["Authorization"] = f"Bearer {token}"
        else:
            self._session.headers["PRIVATE-TOKEN"] = token
        self.group_members = GroupMembers(self)

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body, or None if empty.

        Raises:
            requests.HTTPError: On a non-2xx response
            requests.RequestException: On connection failures and timeouts
        """
        url = f"{self.api_base_url}{path}"
        response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        logger.debug(
            "gitlab_api_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def get_client(
    host: str,
    integrations: ScmIntegrations,
    token: Optional[str] = None,
    timeout: Optional[int] = None,
) -> GitlabClient:
    """Build a client for host.

    A token supplied by the step takes precedence and is sent as an OAuth
    bearer; otherwise the integration token is sent as a PRIVATE-TOKEN.

    Raises:
        InputError: If host has no integration or no token is available
    """
    config = integrations.by_host(host)
    if config is None:
        raise InputError(
            f"No matching integration configuration for host {host}, "
            "please check your integrations config"
        )

    if not token and not config.token:
        raise InputError(f"No token available for host {host}")

    if timeout is None:
        from infrastructure.services.providers import get_settings

        timeout = get_settings().gitlab.request_timeout_seconds

    return GitlabClient(
        api_base_url=config.api_base_url,
        token=token or config.token,
        oauth=bool(token),
        timeout=timeout,
    )
