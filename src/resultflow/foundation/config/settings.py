"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultflow.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.strict_yields
    False
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # RESULTFLOW_STRICT_YIELDS=true
    # RESULTFLOW_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTFLOW_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ResultflowSettings(BaseSettings):
    """Root settings for resultflow.

    Loads configuration from environment variables with RESULTFLOW_ prefix.

    Example environment variables:
        RESULTFLOW_DEBUG=true
        RESULTFLOW_STRICT_YIELDS=true
        RESULTFLOW_LOG_LEVEL=DEBUG
        RESULTFLOW_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    strict_yields: bool = Field(
        default=False,
        description="Panic when a step sequence yields something that is not a container",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultflowSettings:
    """Get the global settings instance (cached)."""
    return ResultflowSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
