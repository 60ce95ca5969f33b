"""resultflow - Result and Option containers with generator-driven control flow.

Quick Start:
    >>> from resultflow import Ok, Err, gen_fn
    >>>
    >>> def divide(a: float, b: float):
    ...     return Err("division by zero") if b == 0 else Ok(a / b)
    >>>
    >>> @gen_fn
    ... def compute(a: float, b: float):
    ...     x = yield divide(a, b)
    ...     y = yield divide(x, 2)
    ...     return y
    >>>
    >>> compute(10, 2)
    Ok(2.5)
    >>> compute(10, 0)
    Err('division by zero')

Async:
    >>> from resultflow import Return, async_gen_fn
    >>>
    >>> @async_gen_fn
    ... async def load(user_id: int):
    ...     user = yield fetch_user(user_id)        # DeferredResult or coroutine
    ...     profile = yield fetch_profile(user)
    ...     yield Return(profile)
    >>>
    >>> profile = await load(1).unwrap_or(None)
"""

from __future__ import annotations

from .foundation.config import ResultflowSettings, clear_settings_cache, get_settings
from .foundation.errors import (
    ErrorHandler,
    ErrorInfo,
    InvalidErrorPanic,
    Panic,
    ResultError,
    StdError,
    to_std_error,
)
from .monads import (
    DeferredOption,
    DeferredResult,
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Return,
    Some,
    async_fn,
    async_gen_fn,
    fn,
    gen_fn,
    is_option,
    is_result,
    run,
    run_async,
    try_async_fn,
    try_fn,
)
from .observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Result", "Ok", "Err", "is_result",
    "Option", "Some", "Nothing", "is_option",
    "DeferredResult", "DeferredOption",
    # Control flow
    "run", "run_async", "Return",
    # Adapters
    "fn", "async_fn", "gen_fn", "async_gen_fn", "try_fn", "try_async_fn",
    # Errors
    "ResultError", "StdError", "ErrorHandler", "ErrorInfo", "Panic", "InvalidErrorPanic", "to_std_error",
    # Config & logging
    "ResultflowSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
