"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, ResultflowSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "ResultflowSettings",
    "clear_settings_cache",
    "get_settings",
]
