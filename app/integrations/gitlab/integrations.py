"""GitLab host integrations registry."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


@dataclass(frozen=True)
class GitlabIntegrationConfig:
    """Connection details for one GitLab host.

    Attributes:
        host: Host name, optionally with port (e.g. "gitlab.com")
        api_base_url: REST API root (e.g. "https://gitlab.com/api/v4")
        base_url: Web root of the instance (e.g. "https://gitlab.com")
        token: Integration token, used when a step supplies none
    """

    host: str
    api_base_url: str
    base_url: str
    token: Optional[str] = None

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "GitlabIntegrationConfig":
        """Build a config from a GITLAB_INTEGRATIONS entry.

        Accepts camelCase (apiBaseUrl, baseUrl) or snake_case keys.
        """
        host = str(entry["host"]).strip().lower()
        base_url = entry.get("baseUrl") or entry.get("base_url") or f"https://{host}"
        base_url = base_url.rstrip("/")
        api_base_url = (
            entry.get("apiBaseUrl") or entry.get("api_base_url") or f"{base_url}/api/v4"
        )
        return cls(
            host=host,
            api_base_url=api_base_url.rstrip("/"),
            base_url=base_url,
            token=entry.get("token") or None,
        )

    def __repr__(self) -> str:
        # keep tokens out of reprs and tracebacks
        token = "***" if self.token else None
        return (
            f"GitlabIntegrationConfig(host={self.host!r}, "
            f"api_base_url={self.api_base_url!r}, base_url={self.base_url!r}, "
            f"token={token!r})"
        )


class ScmIntegrations:
    """Lookup of GitLab integrations by host.

    Example:
        integrations = ScmIntegrations.from_settings(get_settings())
        config = integrations.by_host("gitlab.com")
    """

    def __init__(self, configs: Iterable[GitlabIntegrationConfig]):
        self._by_host: Dict[str, GitlabIntegrationConfig] = {}
        for config in configs:
            self._by_host[config.host.lower()] = config

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ScmIntegrations":
        return cls(
            GitlabIntegrationConfig.from_dict(entry)
            for entry in settings.gitlab.integrations
        )

    def by_host(self, host: str) -> Optional[GitlabIntegrationConfig]:
        """Return the integration for host, or None if not configured."""
        if not host:
            return None
        return self._by_host.get(host.lower())

    def list(self) -> List[GitlabIntegrationConfig]:
        return list(self._by_host.values())
