"""Display and serialization helpers for error payloads.

Uses Pydantic models so error descriptions can be logged or dumped as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, computed_field

JsonDict = dict[str, Any]


class ErrorInfo(BaseModel):
    """Display form of an error: name, message and the name of the error it wraps."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "title": "Error Info",
            "examples": [{"name": "StdError", "message": "connection refused", "origin_name": "OSError"}],
        },
    )

    name: str
    message: str = ""
    origin_name: str | None = None

    @computed_field
    @property
    def expanded_name(self) -> str:
        """Name with provenance, e.g. 'StdError from ValueError'."""
        if self.origin_name and self.origin_name != self.name:
            return f"{self.name} from {self.origin_name}"
        return self.name

    def render(self) -> str:
        return f"{self.expanded_name}: {self.message}" if self.message else self.expanded_name

    __str__ = render


def describe_error(value: object) -> ErrorInfo | None:
    """Build ErrorInfo for exceptions, None for anything else."""
    from .errors import ResultError

    if isinstance(value, ResultError):
        return value.info()
    if isinstance(value, BaseException):
        cause = value.__cause__
        return ErrorInfo(
            name=type(value).__name__,
            message=str(value),
            origin_name=type(cause).__name__ if cause is not None else None,
        )
    return None


def render_value(value: object) -> str:
    """Display string for a container payload, as used in panic messages."""
    info = describe_error(value)
    return info.render() if info is not None else str(value)
