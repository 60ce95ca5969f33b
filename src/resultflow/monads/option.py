"""Option/Maybe monad for explicit presence and absence.

Mirrors Result: Some(value) or Nothing(), immutable, with the same extraction,
mapping and chaining vocabulary plus Option-specific combinators (filter, xor,
flatten) and coercion to Result via ok_or/ok_or_else.

Example:
    >>> Some(5).filter(lambda x: x > 10)
    Nothing
    >>> Nothing().ok_or("missing")
    Err('missing')
    >>> Some(Some(3)).flatten()
    Some(3)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from resultflow.foundation.errors import Panic

from .result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Either Some(value) or Nothing.

    Unlike T | None, an Option can hold None as a present value: Some(None) is not Nothing().
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_some: bool) -> None:
        self._value = value
        self._is_some = is_some

    @classmethod
    def from_optional(cls, value: T | None) -> Option[T]:
        """Some(value) unless value is None."""
        return Nothing() if value is None else Option(value, True)

    def to_optional(self) -> T | None:
        """Contained value, or None."""
        return self._value if self._is_some else None

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract value. Raises Panic on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise Panic("unwrap() on Nothing")

    def expect(self, msg: str) -> T:
        """Extract value, panicking with msg on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise Panic(msg)

    def unwrap_or(self, default: U) -> T | U:
        return self._value if self._is_some else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        return self._value if self._is_some else f()  # type: ignore[return-value]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Option(f(self._value), True) if self._is_some else _NOTHING  # type: ignore[arg-type]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self._value) if self._is_some else default  # type: ignore[arg-type]

    def map_or_else(self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self._value) if self._is_some else default_fn()  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning step; f is never called on Nothing."""
        return f(self._value) if self._is_some else _NOTHING  # type: ignore[arg-type]

    def or_else(self, f: Callable[[], Option[U]]) -> Option[T | U]:
        return self if self._is_some else f()  # type: ignore[return-value]

    def flatten(self: Option[Option[T]]) -> Option[T]:
        """Remove one level of nesting. Some(Some(x)) → Some(x)"""
        return self._value if self._is_some else _NOTHING  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some only if predicate holds for its value."""
        return self if self._is_some and predicate(self._value) else _NOTHING  # type: ignore[arg-type]

    # ─── Logical Combinators ─────────────────────────────────────────────

    def and_(self, other: Option[U]) -> Option[U]:
        """other if self is Some, else Nothing."""
        return other if self._is_some else _NOTHING

    def or_(self, other: Option[U]) -> Option[T | U]:
        """self if Some, else other."""
        return self if self._is_some else other  # type: ignore[return-value]

    def xor(self, other: Option[U]) -> Option[T | U]:
        """Some if exactly one of self and other is Some."""
        if self._is_some and not other._is_some:
            return self  # type: ignore[return-value]
        if other._is_some and not self._is_some:
            return other  # type: ignore[return-value]
        return _NOTHING

    # ─── Inspection ──────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        """Call f with the value for side effects, return self."""
        if self._is_some:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, some: Callable[[T], U], none: Callable[[], E]) -> U | E:
        """Exhaustive pattern match over Some and Nothing."""
        return some(self._value) if self._is_some else none()  # type: ignore[arg-type]

    # ─── Conversion to Result ───────────────────────────────────────────

    def ok_or(self, err: E) -> Result[T, E]:
        """Ok(value) if Some, else Err(err)."""
        return Ok(self._value) if self._is_some else Err(err)

    def ok_or_else(self, err_fn: Callable[[], E]) -> Result[T, E]:
        """Ok(value) if Some, else Err(err_fn()). err_fn runs only on Nothing."""
        return Ok(self._value) if self._is_some else Err(err_fn())

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_some  # noqa: E731
    __hash__ = lambda self: hash((self._is_some, self._value))  # noqa: E731
    __repr__ = lambda self: f"Some({self._value!r})" if self._is_some else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_some == other._is_some and self._value == other._value if isinstance(other, Option) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Some, nothing otherwise."""
        if self._is_some:
            yield self._value  # type: ignore[misc]


# Shared instance, Nothing carries no payload
_NOTHING: Option[Any] = Option(None, False)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant (present)."""
    return Option(value, True)


def Nothing() -> Option[Any]:  # noqa: N802
    """Return the Nothing variant (absent)."""
    return _NOTHING


def is_option(value: object) -> bool:
    """Check whether value is an Option container."""
    return isinstance(value, Option)
