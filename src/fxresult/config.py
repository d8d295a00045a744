"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fxresult.config import get_settings
    >>> settings = get_settings()
    >>> settings.default_outputs
    [<Output.TERMINAL: 'terminal'>]
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # FXRESULT_DEFAULT_OUTPUTS='["console", "terminal"]'
    # FXRESULT_MAX_DEPTH=128
    # FXRESULT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import Output


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FXRESULT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "text"
    colors: bool | None = Field(default=None, description="Console colors; None auto-detects a tty")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class FxResultSettings(BaseSettings):
    """Root settings, loaded from FXRESULT_ environment variables and .env.

    Example environment variables:
        FXRESULT_DEFAULT_OUTPUTS='["notify", "terminal"]'
        FXRESULT_MAX_DEPTH=32
        FXRESULT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="FXRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    default_outputs: list[Output] = Field(
        default_factory=lambda: [Output.TERMINAL],
        description="Channels used when a dispatcher is called without outputs",
    )
    max_depth: Annotated[int, Field(ge=1, le=10_000)] = Field(
        default=64,
        description="Max envelopes peeled by resolve/map_flatten",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> FxResultSettings:
    """Get the global settings instance (cached)."""
    return FxResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from environment.
    """
    get_settings.cache_clear()
