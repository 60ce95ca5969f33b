"""Function adapters: attach the right container shape to a function's return value.

- fn: typing-only pass-through for functions returning Ok/Err
- async_fn: wraps an async function so calls return a DeferredResult
- gen_fn / async_gen_fn: turn step generators into ordinary functions via run()/run_async()
- try_fn / try_async_fn: convert raised exceptions into Err(StdError), re-raising panics
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from functools import wraps
from typing import Any, ParamSpec, TypeVar, overload

from resultflow.foundation.errors import StdError, to_std_error

from .deferred import DeferredResult
from .result import Err, Ok, Result
from .run import run, run_async

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")


def fn(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Type a function returning any Ok/Err shape as returning Result. No runtime effect.

    Example:
        >>> @fn
        ... def divide(a: float, b: float):
        ...     return Err("division by zero") if b == 0 else Ok(a / b)
    """
    return f


def async_fn(f: Callable[P, Awaitable[Result[T, E]]]) -> Callable[P, DeferredResult[T, E]]:
    """Wrap an async function so every call returns a DeferredResult.

    Example:
        >>> @async_fn
        ... async def fetch(key: str) -> Result[bytes, str]: ...
        >>> data = await fetch("a").map(len).unwrap_or(0)
    """
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> DeferredResult[T, E]:
        return DeferredResult(f(*args, **kwargs))
    return wrapper


def gen_fn(f: Callable[P, Generator[Any, Any, T]]) -> Callable[P, Result[T, Any]]:
    """Turn a step generator function into a function returning its run() Result.

    Example:
        >>> @gen_fn
        ... def parse_pair(a: str, b: str):
        ...     x = yield parse_int(a)
        ...     y = yield parse_int(b)
        ...     return (x, y)
        >>> parse_pair("1", "2")
        Ok((1, 2))
    """
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
        return run(lambda: f(*args, **kwargs))
    return wrapper


def async_gen_fn(f: Callable[P, AsyncGenerator[Any, Any]]) -> Callable[P, DeferredResult[Any, Any]]:
    """Turn an async step generator function into a function returning a DeferredResult."""
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> DeferredResult[Any, Any]:
        return run_async(lambda: f(*args, **kwargs))
    return wrapper


# ═══════════════════════════════════════════════════════════════════════════════
# Exception capture
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def try_fn(f: Callable[P, T], handler: None = None) -> Callable[P, Result[T, StdError]]: ...
@overload
def try_fn(f: Callable[P, T], handler: Callable[[StdError], E]) -> Callable[P, Result[T, E]]: ...


def try_fn(f: Callable[P, T], handler: Callable[[StdError], Any] | None = None) -> Callable[P, Result[T, Any]]:
    """Wrap f so raised exceptions come back as Err instead of propagating.

    Exceptions are converted with to_std_error (a Panic is re-raised, never captured)
    and then passed through handler, if given, to produce the Err payload.
    """
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
        try:
            return Ok(f(*args, **kwargs))
        except Exception as e:
            error = to_std_error(e)
            return Err(handler(error) if handler else error)
    return wrapper


@overload
def try_async_fn(f: Callable[P, Awaitable[T]], handler: None = None) -> Callable[P, DeferredResult[T, StdError]]: ...
@overload
def try_async_fn(f: Callable[P, Awaitable[T]], handler: Callable[[StdError], E]) -> Callable[P, DeferredResult[T, E]]: ...


def try_async_fn(
    f: Callable[P, Awaitable[T]],
    handler: Callable[[StdError], Any] | None = None,
) -> Callable[P, DeferredResult[T, Any]]:
    """Async version of try_fn; calls return a DeferredResult."""
    async def capture(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
        try:
            return Ok(await f(*args, **kwargs))
        except Exception as e:
            error = to_std_error(e)
            return Err(handler(error) if handler else error)

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> DeferredResult[T, Any]:
        return DeferredResult(capture(*args, **kwargs))
    return wrapper
