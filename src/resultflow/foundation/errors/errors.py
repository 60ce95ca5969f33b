"""Error taxonomy for recoverable failures and unrecoverable panics.

Recoverable errors (ResultError subclasses) travel inside Err containers as data.
Panics are raised and propagate as ordinary Python exceptions; no composition
operation ever captures one into a container.
"""

from __future__ import annotations

from typing import Callable, ClassVar, TypeAlias, TypeVar

from .types import ErrorInfo

E = TypeVar("E")


class ResultError(Exception):
    """Base for recoverable errors carried as Err payloads.

    Accepts either a message or an exception to wrap. A wrapped exception is kept
    as `origin` and chained as `__cause__`, so tracebacks show where it came from.

    Attributes:
        name: Display name of the error kind (class-level)
        message: Human-readable message
        origin: Wrapped exception, if any
    """

    name: ClassVar[str] = "ResultError"

    def __init__(self, message_or_error: str | BaseException = "") -> None:
        if isinstance(message_or_error, BaseException):
            self.message = str(message_or_error)
            self.origin: BaseException | None = message_or_error
        else:
            self.message = message_or_error
            self.origin = None
        super().__init__(self.message)
        if self.origin is not None:
            self.__cause__ = self.origin

    @property
    def origin_name(self) -> str | None:
        """Class name of the wrapped exception, None when nothing is wrapped."""
        return type(self.origin).__name__ if self.origin is not None else None

    @property
    def expanded_name(self) -> str:
        """Display name including the origin, e.g. 'StdError from ValueError'."""
        return self.info().expanded_name

    def info(self) -> ErrorInfo:
        """Structured, serializable description of this error."""
        return ErrorInfo(name=self.name or type(self).__name__, message=self.message, origin_name=self.origin_name)

    def render(self) -> str:
        """Format as '<expanded name>: <message>'."""
        return self.info().render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class StdError(ResultError):
    """Standard recoverable error, produced when converting caught exceptions."""

    name: ClassVar[str] = "StdError"


ErrorHandler: TypeAlias = Callable[[StdError], E]


class Panic(RuntimeError):
    """Unrecoverable failure signal.

    Raised by unwrap/expect on the wrong variant and by the error conversion helpers.
    Subclasses RuntimeError so callers that only care about 'something went badly
    wrong' can still catch it at a process boundary.
    """

    def __init__(self, message: str = "", *, origin: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.origin = origin
        if isinstance(origin, BaseException):
            self.__cause__ = origin

    @property
    def name(self) -> str:
        """'Panic', or 'Panic from <origin class>' when wrapping an exception."""
        if isinstance(self.origin, BaseException):
            return f"Panic from {type(self.origin).__name__}"
        return "Panic"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidErrorPanic(Panic):
    """Raised when a value that is not an exception is offered as an error."""

    def __init__(self, value: object) -> None:
        super().__init__(f"expected an exception instance, got {type(value).__name__}: {value!r}")
        self.value = value


def to_std_error(error: object) -> StdError:
    """Convert an arbitrary caught object into a recoverable StdError.

    - Panic: re-raised unchanged, never captured
    - Any other exception: wrapped, with the original kept as `origin`
    - Anything else: raises InvalidErrorPanic
    """
    if isinstance(error, Panic):
        raise error
    if isinstance(error, BaseException):
        return StdError(error)
    raise InvalidErrorPanic(error)
