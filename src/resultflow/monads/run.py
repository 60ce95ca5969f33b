"""Generator-driven control flow over Result containers.

Write a sequence of fallible steps as straight-line code: each `yield` hands a
Result to the interpreter, which sends back the Ok value or stops at the first
Err and returns it. No nested and_then chains needed.

Example:
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     return Err("division by zero") if b == 0 else Ok(a / b)
    >>>
    >>> def steps():
    ...     half = yield divide(10, 2)
    ...     quarter = yield divide(half, 2)
    ...     return quarter
    >>>
    >>> run(steps)
    Ok(2.5)

Async steps work the same way through run_async(); a step may also yield a
DeferredResult or any awaitable, which is resolved before the next step runs.
Async generators cannot `return` a value, so they finish with `yield Return(x)`.

A yielded value that is neither a container nor Return ends the sequence as
Ok(value). With strict yields enabled (argument or RESULTFLOW_STRICT_YIELDS) it
raises Panic instead.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncGenerator, Callable, Generator
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from resultflow.foundation.config import get_settings
from resultflow.foundation.errors import Panic, render_value
from resultflow.observability import get_logger

from .deferred import DeferredResult, settle
from .result import Ok, Result

T = TypeVar("T")

logger = get_logger("run")

Steps: TypeAlias = "Generator[Any, Any, Any]"
AsyncSteps: TypeAlias = "AsyncGenerator[Any, Any]"


@dataclass(frozen=True, slots=True)
class Return(Generic[T]):
    """Yield to finish a step sequence with `value` (Result or plain value)."""

    value: T


def _strict(strict: bool | None) -> bool:
    return get_settings().strict_yields if strict is None else strict


def _as_result(value: object) -> Result[Any, Any]:
    return value if isinstance(value, Result) else Ok(value)


def _unexpected(step: int, value: object) -> Panic:
    return Panic(f"step {step} yielded {type(value).__name__} {value!r}, expected a Result")


def run(producer: Callable[[], Steps] | Steps, *, strict: bool | None = None) -> Result[Any, Any]:
    """Drive a generator of Result steps to completion.

    Args:
        producer: Zero-argument callable returning a generator (or the generator itself)
        strict: Panic on non-container yields; defaults to settings.strict_yields

    Returns:
        The first Err yielded, or Ok of the generator's return value. A returned
        Result is passed through as is.
    """
    gen = producer() if callable(producer) else producer
    is_strict = _strict(strict)
    sent: Any = None
    step = 0
    try:
        while True:
            try:
                yielded = gen.send(sent)
            except StopIteration as stop:
                return _as_result(stop.value)
            step += 1
            if isinstance(yielded, Return):
                return _as_result(yielded.value)
            if not isinstance(yielded, Result):
                if is_strict:
                    raise _unexpected(step, yielded)
                return Ok(yielded)
            if yielded.is_err():
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("step %d short-circuited: %s", step, render_value(yielded.unwrap_err()))
                return yielded
            sent = yielded.unwrap()
    finally:
        gen.close()


async def _drive(producer: Callable[[], AsyncSteps] | AsyncSteps, strict: bool | None) -> Result[Any, Any]:
    gen = producer() if callable(producer) else producer
    is_strict = _strict(strict)
    current: Result[Any, Any] = Ok()
    step = 0
    try:
        while True:
            try:
                yielded = await gen.asend(current.unwrap())
            except StopAsyncIteration:
                return Ok()
            step += 1
            if isinstance(yielded, Return):
                return _as_result(await settle(yielded.value))
            if isinstance(yielded, Result):
                resolved = yielded
            elif inspect.isawaitable(yielded):
                value = await settle(yielded)
                if not isinstance(value, Result) and is_strict:
                    raise _unexpected(step, value)
                resolved = _as_result(value)
            elif is_strict:
                raise _unexpected(step, yielded)
            else:
                return Ok(yielded)
            if resolved.is_err():
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("async step %d short-circuited: %s", step, render_value(resolved.unwrap_err()))
                return resolved
            current = resolved
    finally:
        await gen.aclose()


def run_async(producer: Callable[[], AsyncSteps] | AsyncSteps, *, strict: bool | None = None) -> DeferredResult[Any, Any]:
    """Drive an async generator of steps, one at a time, returning a DeferredResult.

    Each yielded Result, DeferredResult or awaitable is resolved before the generator
    is resumed with its Ok value. The first Err ends the sequence: the generator is
    closed and no later step runs. Running off the end gives Ok(None).

    Nothing executes until the returned DeferredResult is awaited.
    """
    return DeferredResult(_drive(producer, strict))
