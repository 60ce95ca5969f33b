"""Logging setup for resultflow.

Library modules log through stdlib loggers under the 'resultflow' namespace and
never install handlers themselves. Applications opt in with configure_logging(),
which reads LoggingSettings and attaches a single handler.

Quick Start:
    >>> from resultflow.observability import configure_logging, get_logger
    >>> configure_logging()                     # settings from RESULTFLOW_LOG_*
    >>> log = get_logger("run")
    >>> log.debug("step %d short-circuited", 2)
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from resultflow.foundation.config import LoggingSettings

ROOT_LOGGER = "resultflow"

# Marks the handler installed by configure_logging so reconfiguring replaces it
_HANDLER_ATTR = "_resultflow_handler"

# Standard LogRecord attributes, everything else on a record came in via `extra=`
_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger in the resultflow namespace, e.g. get_logger("run") -> 'resultflow.run'."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation. Fields passed via `extra=` are included."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {}
        if self.include_timestamps:
            payload["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        payload |= {"level": record.levelname.lower(), "logger": record.name, "event": record.getMessage()}
        payload |= {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def _text_formatter(include_timestamps: bool) -> logging.Formatter:
    fmt = "%(levelname)s %(name)s: %(message)s"
    return logging.Formatter(f"%(asctime)s {fmt}" if include_timestamps else fmt)


def configure_logging(settings: LoggingSettings | None = None, *, output: TextIO | None = None) -> logging.Logger:
    """Attach a handler to the 'resultflow' logger according to settings.

    Calling again replaces the previously installed handler instead of adding another.
    """
    if settings is None:
        from resultflow.foundation.config import get_settings
        settings = get_settings().logging

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(
        JsonFormatter(include_timestamps=settings.include_timestamps)
        if settings.format == "json"
        else _text_formatter(settings.include_timestamps)
    )
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    return logger
