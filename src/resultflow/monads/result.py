"""Result/Either monad for type-safe error handling.

Implements a discriminated union for success/failure with full monadic operations:
- Functor: map, map_err
- Monad: and_then (bind)
- Bifunctor: bimap
- Railway-oriented composition

Wrong-variant access (unwrap, expect, tap) raises Panic. Nothing in here catches
exceptions: callbacks that raise propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from resultflow.foundation.errors import Panic, render_value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .option import Option

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False


def _panic(msg: str, value: object) -> Panic:
    """Build a Panic for wrong-variant access, chaining exceptions as origin."""
    return Panic(f"{msg}: {render_value(value)}", origin=value)


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Sum type enforcing exhaustive error handling. Implements Functor, Monad
    and Bifunctor interfaces for railway-oriented programming.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).and_then(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises Panic on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise _panic("unwrap() on Err", self._value)

    def unwrap_err(self) -> E:
        """Extract Err value. Raises Panic on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise _panic("unwrap_err() on Ok", self._value)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Extract Ok value, panicking with msg as prefix on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise _panic(msg, self._value)

    def expect_err(self, msg: str) -> E:
        """Extract Err value, panicking with msg as prefix on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise _panic(msg, self._value)

    def tap(self) -> T:
        """Surface an Err as a Panic at a boundary; Ok value passes through.

        Use where a recoverable failure should abort the caller instead of being handled.
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise _panic("tap() on Err", self._value)

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Apply f to Ok value, or return default on Err."""
        return f(self._value) if self._is_ok else default  # type: ignore[arg-type]

    def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Apply f to Ok value, or default_fn to Err value."""
        return f(self._value) if self._is_ok else default_fn(self._value)  # type: ignore[arg-type]

    # ─── Bifunctor Operations ──────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err. Signature: Result[T,E] → (T→U, E→F) → Result[U,F]"""
        return Result(ok_fn(self._value), _OK) if self._is_ok else Result(err_fn(self._value), _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ──────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Monadic bind (>>=). Chain operations that can fail; f is never called on Err.

        Example:
            >>> Ok("42").and_then(lambda s: Ok(int(s))).and_then(lambda n: Ok(n*2) if n>0 else Err("neg"))
            Ok(84)
        """
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Alias for and_then."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type,return-value]

    def or_else(self, f: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        return f(self._value) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type,return-value]

    # ─── Logical Combinators ─────────────────────────────────────────────

    def and_(self, other: Result[U, F]) -> Result[U, E | F]:
        """Return other if Ok, else self's Err. `other` is already evaluated by the caller."""
        return other if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type,return-value]

    def or_(self, other: Result[U, F]) -> Result[T | U, F]:
        """Return self if Ok, else other."""
        return Result(self._value, _OK) if self._is_ok else other  # type: ignore[arg-type,return-value]

    # ─── Inspection & Utilities ──────────────────────────────────────────

    def ok(self) -> Option[T]:
        """Some(value) if Ok, Nothing if Err."""
        from .option import Nothing, Some
        return Some(self._value) if self._is_ok else Nothing()  # type: ignore[arg-type]

    def err(self) -> Option[E]:
        """Some(error) if Err, Nothing if Ok."""
        from .option import Nothing, Some
        return Some(self._value) if not self._is_ok else Nothing()  # type: ignore[arg-type]

    def inspect(self, f: Callable[[T], Any]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], F]) -> U | F:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Conversion ────────────────────────────────────────────────────────

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result. Result[Result[T,E],E] → Result[T,E]"""
        return self._value if self._is_ok else Result(self._value, _ERR)  # type: ignore[return-value,arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T = None) -> Result[T, Any]:  # type: ignore[assignment]  # noqa: N802
    """Construct Ok variant (success). Ok() holds None."""
    return Result(value, _OK)


def Err(error: E) -> Result[Any, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def is_result(value: object) -> bool:
    """Check whether value is a Result container."""
    return isinstance(value, Result)
