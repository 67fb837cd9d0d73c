"""GitLab integration settings."""

import json
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
import structlog

from infrastructure.configuration.base import ComponentSettings

logger = structlog.stdlib.get_logger().bind(component="config.gitlab")

DEFAULT_GITLAB_HOST = "gitlab.com"


class GitlabSettings(ComponentSettings):
    """GitLab hosts the scaffolder actions are allowed to talk to.

    Environment Variables:
        GITLAB_INTEGRATIONS: JSON list of host integrations
        GITLAB_REQUEST_TIMEOUT_SECONDS: Timeout applied to every GitLab API call

    Integrations Configuration (GITLAB_INTEGRATIONS):
        Each entry describes one GitLab host. Only ``host`` is required;
        ``apiBaseUrl`` defaults to ``https://<host>/api/v4`` and ``baseUrl``
        to ``https://<host>``.

        Schema:
            [
                {
                    "host": "gitlab.com",
                    "token": "glpat-...",
                    "apiBaseUrl": "https://gitlab.com/api/v4"
                },
                {
                    "host": "gitlab.internal.example",
                    "baseUrl": "https://gitlab.internal.example"
                }
            ]

        Validation:
            - Every entry must be an object with a non-empty ``host``
            - Hosts must be unique

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        hosts = [entry["host"] for entry in settings.gitlab.integrations]
        ```
    """

    integrations: List[Dict[str, Any]] = Field(
        default_factory=lambda: [{"host": DEFAULT_GITLAB_HOST}],
        alias="GITLAB_INTEGRATIONS",
        description="Per-host GitLab integration configuration",
    )

    request_timeout_seconds: int = Field(
        default=30,
        alias="GITLAB_REQUEST_TIMEOUT_SECONDS",
        description="Timeout for GitLab API requests (seconds)",
    )

    @field_validator("integrations", mode="before")
    @classmethod
    def _parse_integrations(cls, v: Optional[Any]) -> Any:
        """Parse GITLAB_INTEGRATIONS from JSON string or list."""
        if v is None:
            return [{"host": DEFAULT_GITLAB_HOST}]
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            try:
                return json.loads(s) if s else []
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid GITLAB_INTEGRATIONS JSON: {e} (value: {s[:80]}...)"
                ) from e
        raise ValueError("GITLAB_INTEGRATIONS must be a JSON string or a list")

    @field_validator("integrations", mode="after")
    @classmethod
    def _validate_integrations(cls, v: List[Dict[str, Any]]):
        """Validate GITLAB_INTEGRATIONS entries."""
        seen = set()
        for entry in v:
            if not isinstance(entry, dict) or not entry.get("host"):
                raise ValueError(
                    "Every GITLAB_INTEGRATIONS entry must be an object with a 'host'"
                )
            host = str(entry["host"]).strip().lower()
            if host in seen:
                raise ValueError(f"Duplicate GitLab integration for host {host}")
            seen.add(host)

        if not v:
            logger.warning("no_gitlab_integrations_configured")
        return v

    def __init__(self, **kwargs):
        """Allow programmatic construction using 'integrations' keyword."""
        if "integrations" in kwargs and "GITLAB_INTEGRATIONS" not in kwargs:
            kwargs["GITLAB_INTEGRATIONS"] = kwargs.pop("integrations")
        super().__init__(**kwargs)
