"""Runtime settings loaded from environment variables."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_PREFIX = "MLCLIENT_"

DEFAULT_DASHBOARDS_USER_AGENT = "OpenSearch Dashboards"
DEFAULT_UI_METADATA_EXCLUDE = ("ui_metadata",)
DEFAULT_BASE_URI = "/_plugins/_ml"


class Settings(BaseSettings):
    """Settings for the REST surface and logging.

    Every field reads the matching MLCLIENT_* environment variable; list values
    are comma-separated.

    Example:
        MLCLIENT_LOG_FORMAT=json MLCLIENT_UI_METADATA_EXCLUDE=ui_metadata,owner
    """

    dashboards_user_agent: str = Field(
        default=DEFAULT_DASHBOARDS_USER_AGENT,
        description="User-Agent fragment identifying the first-party UI client",
    )
    ui_metadata_exclude: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_UI_METADATA_EXCLUDE),
        description="Fields excluded from search results for non-UI callers",
    )
    base_uri: str = Field(default=DEFAULT_BASE_URI, description="Path prefix of the ML REST endpoints")
    log_level: str = Field(default="INFO", description="Log level name")
    log_format: str = Field(default="console", description="Log output format: console or json")

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="forbid", str_strip_whitespace=True)

    @field_validator("ui_metadata_exclude", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @classmethod
    def from_env(cls, *, prefix: str | None = None) -> Settings:
        """Load settings from the environment, optionally under another variable prefix."""
        if prefix is None:
            return cls()
        return cls(_env_prefix=prefix)
