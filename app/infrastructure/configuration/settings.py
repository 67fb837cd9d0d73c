"""Aggregate application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.gitlab import GitlabSettings
from infrastructure.configuration.idempotency import IdempotencySettings


class Settings(BaseSettings):
    """Top-level settings holding one section per component.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Commit the deployment was built from

    Sections:
        gitlab: GitLab hosts and request timeout (GitlabSettings)
        idempotency: Checkpoint retention (IdempotencySettings)

    Sections not passed to the constructor are built from the environment,
    so tests can override a single section:

        Settings(gitlab=GitlabSettings(integrations=[{"host": "gitlab.com"}]))
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    gitlab: GitlabSettings
    idempotency: IdempotencySettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        sections = {
            "gitlab": GitlabSettings,
            "idempotency": IdempotencySettings,
        }
        for name, section_class in sections.items():
            kwargs.setdefault(name, section_class())

        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX
