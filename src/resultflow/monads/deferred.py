"""Deferred containers: Result and Option operations over a pending awaitable.

A DeferredResult wraps one awaitable that resolves to a Result and re-exposes the
Result vocabulary. Container-returning operations (map, and_then, ...) compose
lazily and return a new deferred wrapper; value-returning operations (unwrap,
match, ...) are coroutines. Awaiting the wrapper gives the resolved container.

Nothing starts running until the wrapper is awaited, and combining two wrappers
(and_, or_, xor) awaits self first, then the other operand, never concurrently.

Example:
    >>> async def fetch(user_id: int) -> Result[dict, str]:
    ...     return Ok({"id": user_id}) if user_id > 0 else Err("bad id")
    >>>
    >>> name = await DeferredResult(fetch(1)).map(lambda u: u["id"]).unwrap_or(0)

Replay follows the wrapped awaitable: tasks and futures can be awaited repeatedly,
a bare coroutine only once. No caching is layered on top.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Generator
from typing import Any, Callable, Generic, TypeVar

from .option import Option
from .result import Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
C = TypeVar("C")


async def settle(value: Any) -> Any:
    """Await value repeatedly until it is no longer awaitable."""
    while inspect.isawaitable(value):
        value = await value
    return value


class _Ready(Generic[C]):
    """Awaitable over an already-known value. Replayable."""

    __slots__ = ("_value",)

    def __init__(self, value: C) -> None:
        self._value = value

    def __await__(self) -> Generator[Any, None, C]:
        yield from ()
        return self._value


class _Deferred(Generic[C]):
    """Awaitable surface shared by the deferred wrappers. The handle stays private."""

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[C] | _Deferred[C]) -> None:
        self._awaitable: Awaitable[C] = awaitable._awaitable if isinstance(awaitable, _Deferred) else awaitable

    def __await__(self) -> Generator[Any, None, C]:
        return self._awaitable.__await__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._awaitable!r})"

    async def _apply(self, op: Callable[[C], Any]) -> Any:
        """Resolve self, apply a synchronous operation to the container."""
        return op(await self)

    async def _bind(self, op: Callable[[C], Any]) -> Any:
        """Resolve self, apply op, and await its outcome if op handed back an awaitable."""
        return await settle(op(await self))

    async def _combine(self, other: Any, op: Callable[[C, Any], C]) -> C:
        """Resolve self, then other, then combine them."""
        left = await self
        right = await settle(other)
        return op(left, right)


class DeferredResult(_Deferred[Result[T, E]]):
    """A Result that is not resolved yet.

    Accepts any awaitable resolving to a Result (coroutine, Task, Future) or another
    DeferredResult. Awaiting never raises for Err; only exceptions raised by the
    wrapped awaitable itself propagate.
    """

    __slots__ = ()

    @classmethod
    def of(cls, result: Result[T, E]) -> DeferredResult[T, E]:
        """Lift an already-resolved Result."""
        return cls(_Ready(result))

    # ─── Lazy composition ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> DeferredResult[U, E]:
        return DeferredResult(self._apply(lambda r: r.map(f)))

    def map_err(self, f: Callable[[E], F]) -> DeferredResult[T, F]:
        return DeferredResult(self._apply(lambda r: r.map_err(f)))

    def and_then(self, f: Callable[[T], Result[U, F] | Awaitable[Result[U, F]]]) -> DeferredResult[U, E | F]:
        """Chain a step; f may return a Result or an awaitable of one."""
        return DeferredResult(self._bind(lambda r: r.and_then(f)))

    def or_else(self, f: Callable[[E], Result[U, F] | Awaitable[Result[U, F]]]) -> DeferredResult[T | U, F]:
        """Recover from Err; f may return a Result or an awaitable of one."""
        return DeferredResult(self._bind(lambda r: r.or_else(f)))

    def and_(self, other: Result[U, F] | Awaitable[Result[U, F]]) -> DeferredResult[U, E | F]:
        return DeferredResult(self._combine(other, Result.and_))

    def or_(self, other: Result[U, F] | Awaitable[Result[U, F]]) -> DeferredResult[T | U, F]:
        return DeferredResult(self._combine(other, Result.or_))

    def inspect(self, f: Callable[[T], Any]) -> DeferredResult[T, E]:
        return DeferredResult(self._apply(lambda r: r.inspect(f)))

    def inspect_err(self, f: Callable[[E], Any]) -> DeferredResult[T, E]:
        return DeferredResult(self._apply(lambda r: r.inspect_err(f)))

    def flatten(self: DeferredResult[Result[T, E], E]) -> DeferredResult[T, E]:
        return DeferredResult(self._apply(Result.flatten))

    def ok(self) -> DeferredOption[T]:
        return DeferredOption(self._apply(Result.ok))

    def err(self) -> DeferredOption[E]:
        return DeferredOption(self._apply(Result.err))

    # ─── Resolving operations ───────────────────────────────────────────

    async def is_ok(self) -> bool:
        return (await self).is_ok()

    async def is_err(self) -> bool:
        return (await self).is_err()

    async def unwrap(self) -> T:
        return (await self).unwrap()

    async def unwrap_err(self) -> E:
        return (await self).unwrap_err()

    async def expect(self, msg: str) -> T:
        return (await self).expect(msg)

    async def expect_err(self, msg: str) -> E:
        return (await self).expect_err(msg)

    async def unwrap_or(self, default: U) -> T | U:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        return (await self).unwrap_or_else(f)

    async def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return (await self).map_or(default, f)

    async def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        return (await self).map_or_else(default_fn, f)

    async def match(self, *, ok: Callable[[T], U], err: Callable[[E], F]) -> U | F:
        return (await self).match(ok=ok, err=err)

    async def tap(self) -> T:
        return (await self).tap()


class DeferredOption(_Deferred[Option[T]]):
    """An Option that is not resolved yet. Mirrors DeferredResult."""

    __slots__ = ()

    @classmethod
    def of(cls, option: Option[T]) -> DeferredOption[T]:
        """Lift an already-resolved Option."""
        return cls(_Ready(option))

    # ─── Lazy composition ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> DeferredOption[U]:
        return DeferredOption(self._apply(lambda o: o.map(f)))

    def and_then(self, f: Callable[[T], Option[U] | Awaitable[Option[U]]]) -> DeferredOption[U]:
        return DeferredOption(self._bind(lambda o: o.and_then(f)))

    def or_else(self, f: Callable[[], Option[U] | Awaitable[Option[U]]]) -> DeferredOption[T | U]:
        return DeferredOption(self._bind(lambda o: o.or_else(f)))

    def and_(self, other: Option[U] | Awaitable[Option[U]]) -> DeferredOption[U]:
        return DeferredOption(self._combine(other, Option.and_))

    def or_(self, other: Option[U] | Awaitable[Option[U]]) -> DeferredOption[T | U]:
        return DeferredOption(self._combine(other, Option.or_))

    def xor(self, other: Option[U] | Awaitable[Option[U]]) -> DeferredOption[T | U]:
        return DeferredOption(self._combine(other, Option.xor))

    def filter(self, predicate: Callable[[T], bool]) -> DeferredOption[T]:
        return DeferredOption(self._apply(lambda o: o.filter(predicate)))

    def flatten(self: DeferredOption[Option[T]]) -> DeferredOption[T]:
        return DeferredOption(self._apply(Option.flatten))

    def inspect(self, f: Callable[[T], Any]) -> DeferredOption[T]:
        return DeferredOption(self._apply(lambda o: o.inspect(f)))

    def ok_or(self, err: E) -> DeferredResult[T, E]:
        return DeferredResult(self._apply(lambda o: o.ok_or(err)))

    def ok_or_else(self, err_fn: Callable[[], E]) -> DeferredResult[T, E]:
        return DeferredResult(self._apply(lambda o: o.ok_or_else(err_fn)))

    # ─── Resolving operations ───────────────────────────────────────────

    async def is_some(self) -> bool:
        return (await self).is_some()

    async def is_none(self) -> bool:
        return (await self).is_none()

    async def unwrap(self) -> T:
        return (await self).unwrap()

    async def expect(self, msg: str) -> T:
        return (await self).expect(msg)

    async def unwrap_or(self, default: U) -> T | U:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        return (await self).unwrap_or_else(f)

    async def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return (await self).map_or(default, f)

    async def map_or_else(self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:
        return (await self).map_or_else(default_fn, f)

    async def match(self, *, some: Callable[[T], U], none: Callable[[], F]) -> U | F:
        return (await self).match(some=some, none=none)
