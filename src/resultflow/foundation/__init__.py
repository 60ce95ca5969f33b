"""Foundation - error taxonomy and configuration for resultflow."""

from __future__ import annotations

__all__ = [
    # Errors
    "ResultError", "StdError", "ErrorHandler", "Panic", "InvalidErrorPanic", "to_std_error",
    "ErrorInfo", "describe_error", "render_value",
    # Config
    "ResultflowSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ResultError", "StdError", "ErrorHandler", "Panic", "InvalidErrorPanic", "to_std_error",
                "ErrorInfo", "describe_error", "render_value"):
        from . import errors
        return getattr(errors, name)

    if name in ("ResultflowSettings", "LoggingSettings", "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
