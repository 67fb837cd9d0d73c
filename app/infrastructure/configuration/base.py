"""Base class shared by every settings section."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ComponentSettings(BaseSettings):
    """Settings section for one component (GitLab hosts, checkpoint store).

    Sections read the same ``.env`` file as the aggregate ``Settings`` and
    ignore variables owned by other sections. Variable names are matched
    case-sensitively through each field's alias.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
