"""Tests for the function adapters."""

from __future__ import annotations

import asyncio

import pytest

from resultflow import (
    DeferredResult,
    Err,
    InvalidErrorPanic,
    Ok,
    Panic,
    Result,
    Return,
    StdError,
    async_fn,
    async_gen_fn,
    fn,
    gen_fn,
    try_async_fn,
    try_fn,
)


def divide(a: float, b: float) -> Result[float, str]:
    return Err("division by zero") if b == 0 else Ok(a / b)


def test_fn_is_pass_through() -> None:
    assert fn(divide) is divide
    assert fn(divide)(4, 2) == Ok(2.0)


@pytest.mark.asyncio
async def test_async_fn_returns_deferred() -> None:
    @async_fn
    async def fetch(key: str) -> Result[str, str]:
        await asyncio.sleep(0)
        return Ok(key.upper()) if key else Err("empty key")

    deferred = fetch("a")
    assert isinstance(deferred, DeferredResult)
    assert await deferred.map(lambda s: s * 2) == Ok("AA")
    assert await fetch("").unwrap_or("default") == "default"
    assert fetch.__name__ == "fetch"


@pytest.mark.asyncio
async def test_async_fn_accepts_deferred_return() -> None:
    wrapped = async_fn(lambda x: DeferredResult.of(Ok(x)))
    assert await wrapped(3) == Ok(3)


def test_gen_fn_short_circuits() -> None:
    reached: list[int] = []

    @gen_fn
    def compute(a: float, b: float):
        x = yield divide(a, b)
        reached.append(1)
        y = yield divide(x, 0)
        reached.append(2)
        return y

    assert compute(10, 2) == Err("division by zero")
    assert reached == [1]
    assert compute.__name__ == "compute"


def test_gen_fn_runs_fresh_generator_per_call() -> None:
    @gen_fn
    def add(a: int, b: int):
        x = yield Ok(a)
        y = yield Ok(b)
        return x + y

    assert add(1, 2) == Ok(3)
    assert add(3, 4) == Ok(7)


@pytest.mark.asyncio
async def test_async_gen_fn() -> None:
    async def divide_later(a: float, b: float) -> Result[float, str]:
        await asyncio.sleep(0)
        return divide(a, b)

    @async_gen_fn
    async def compute(a: float, b: float):
        x = yield divide_later(a, b)
        y = yield DeferredResult(divide_later(x, 2))
        yield Return(y)

    assert await compute(10, 2) == Ok(2.5)
    assert await compute(10, 0) == Err("division by zero")


def to_int(s: str) -> int:
    return int(s)


def test_try_fn_captures_exceptions() -> None:
    parse = try_fn(to_int)
    assert parse("12") == Ok(12)

    error = parse("x").unwrap_err()
    assert isinstance(error, StdError)
    assert isinstance(error.origin, ValueError)


def test_try_fn_with_handler() -> None:
    parse = try_fn(to_int, lambda e: f"parse failed: {e.origin_name}")
    assert parse("x") == Err("parse failed: ValueError")


def test_try_fn_never_captures_panics() -> None:
    @try_fn
    def boom() -> int:
        return Err("inner").unwrap()

    with pytest.raises(Panic, match="inner"):
        boom()


def test_try_fn_lets_base_exceptions_through() -> None:
    @try_fn
    def interrupted() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        interrupted()


@pytest.mark.asyncio
async def test_try_async_fn() -> None:
    @try_async_fn
    async def load(path: str) -> str:
        await asyncio.sleep(0)
        if not path:
            raise FileNotFoundError("no path")
        return f"contents of {path}"

    assert await load("a.txt") == Ok("contents of a.txt")
    error = await load("").unwrap_err()
    assert error.render() == "StdError from FileNotFoundError: no path"


@pytest.mark.asyncio
async def test_try_async_fn_reraises_panics() -> None:
    @try_async_fn
    async def bad() -> None:
        raise InvalidErrorPanic(None)

    with pytest.raises(InvalidErrorPanic):
        await bad()
