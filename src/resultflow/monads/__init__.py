"""Monadic error handling: Result and Option, deferred variants, step interpreters.

Example:
    >>> from resultflow.monads import Result, Ok, Err, run
    >>>
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .and_then(lambda x: Ok(x + 1))
    ... )
    >>> assert result.unwrap() == 11.0
"""

from .deferred import DeferredOption, DeferredResult
from .fn import async_fn, async_gen_fn, fn, gen_fn, try_async_fn, try_fn
from .option import Nothing, Option, Some, is_option
from .result import Err, Ok, Result, is_result
from .run import Return, run, run_async

__all__ = [
    # Core types
    "Result", "Ok", "Err", "is_result",
    "Option", "Some", "Nothing", "is_option",
    # Deferred
    "DeferredResult", "DeferredOption",
    # Interpreters
    "run", "run_async", "Return",
    # Adapters
    "fn", "async_fn", "gen_fn", "async_gen_fn", "try_fn", "try_async_fn",
]
