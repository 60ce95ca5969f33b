"""Tests for the run()/run_async() step interpreters."""

from __future__ import annotations

import asyncio
import logging
from email.message import Message
from urllib.error import HTTPError

import pytest

from resultflow import DeferredResult, Err, Ok, Panic, Result, Return, run, run_async
from resultflow.foundation.config import clear_settings_cache


def divide(a: float, b: float) -> Result[float, str]:
    return Err("division by zero") if b == 0 else Ok(a / b)


async def divide_later(a: float, b: float) -> Result[float, str]:
    await asyncio.sleep(0)
    return divide(a, b)


class Unprintable:
    def __str__(self) -> str:
        raise AssertionError("rendered while DEBUG logging is off")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RESULTFLOW_STRICT_YIELDS", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


# ═════════════════════════════════════════════════════════════════════════════
# Synchronous interpreter
# ═════════════════════════════════════════════════════════════════════════════


class TestRun:
    def test_returns_final_value_as_ok(self) -> None:
        def steps():
            a = yield divide(10, 2)
            b = yield divide(a, 5)
            return a + b

        assert run(steps) == Ok(6.0)

    def test_short_circuits_on_first_err(self) -> None:
        reached: list[str] = []

        def steps():
            a = yield divide(10, 2)
            reached.append("after first")
            yield divide(a, 0)
            reached.append("after second")
            return a

        assert run(steps) == Err("division by zero")
        assert reached == ["after first"]

    def test_closes_generator_on_err(self) -> None:
        cleaned: list[bool] = []

        def steps():
            try:
                yield Err("stop")
            finally:
                cleaned.append(True)

        assert run(steps) == Err("stop")
        assert cleaned == [True]

    def test_accepts_generator_object(self) -> None:
        def steps():
            x = yield Ok(1)
            return x

        assert run(steps()) == Ok(1)

    def test_returned_result_passes_through(self) -> None:
        def steps():
            yield Ok(1)
            return Err("late failure")

        assert run(steps) == Err("late failure")

    def test_return_marker(self) -> None:
        def steps():
            x = yield Ok(2)
            yield Return(x * 3)
            pytest.fail("not resumed after Return")

        assert run(steps) == Ok(6)

    def test_empty_generator(self) -> None:
        def steps():
            return
            yield  # pragma: no cover

        assert run(steps) == Ok(None)

    def test_non_container_yield_terminates(self) -> None:
        reached: list[str] = []

        def steps():
            yield "plain"
            reached.append("resumed")

        assert run(steps, strict=False) == Ok("plain")
        assert reached == []

    def test_strict_mode_panics_on_non_container(self) -> None:
        def steps():
            yield 42

        with pytest.raises(Panic, match="step 1 yielded int"):
            run(steps, strict=True)

    def test_strict_mode_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULTFLOW_STRICT_YIELDS", "true")
        clear_settings_cache()

        def steps():
            yield "oops"

        with pytest.raises(Panic):
            run(steps)

    def test_exceptions_propagate(self) -> None:
        def steps():
            yield Ok(1)
            raise KeyError("boom")

        with pytest.raises(KeyError):
            run(steps)

    def test_panic_from_unwrap_propagates(self) -> None:
        def steps():
            yield Ok(1)
            Err("inner").unwrap()

        with pytest.raises(Panic, match="inner"):
            run(steps)

    def test_logs_short_circuit(self, caplog: pytest.LogCaptureFixture) -> None:
        def steps():
            yield Ok(1)
            yield Err("nope")

        with caplog.at_level(logging.DEBUG, logger="resultflow.run"):
            run(steps)
        assert "step 2 short-circuited: nope" in caplog.text

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.WARNING])
    def test_short_circuits_on_exception_with_own_info_method(
        self, level: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        error = HTTPError("http://example.test", 404, "Not Found", Message(), None)

        def steps():
            yield Err(error)

        with caplog.at_level(level, logger="resultflow.run"):
            assert run(steps) == Err(error)

    def test_payload_not_rendered_unless_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        def steps():
            yield Err(Unprintable())

        with caplog.at_level(logging.WARNING, logger="resultflow.run"):
            assert run(steps).is_err()


# ═════════════════════════════════════════════════════════════════════════════
# Asynchronous interpreter
# ═════════════════════════════════════════════════════════════════════════════


class TestRunAsync:
    @pytest.mark.asyncio
    async def test_returns_deferred_result(self) -> None:
        async def steps():
            a = yield divide(10, 2)
            b = yield DeferredResult(divide_later(a, 5))
            yield Return(a + b)

        deferred = run_async(steps)
        assert isinstance(deferred, DeferredResult)
        assert await deferred == Ok(6.0)

    @pytest.mark.asyncio
    async def test_division_scenario_stops_before_third_step(self) -> None:
        reached: list[int] = []

        async def steps():
            reached.append(1)
            half = yield DeferredResult(divide_later(10, 2))
            reached.append(2)
            yield DeferredResult(divide_later(half, 0))
            reached.append(3)
            yield Return(half)

        assert await run_async(steps) == Err("division by zero")
        assert reached == [1, 2]

    @pytest.mark.asyncio
    async def test_middle_failure_skips_later_steps(self) -> None:
        invoked: list[str] = []

        async def step(name: str, result: Result[int, str]) -> Result[int, str]:
            invoked.append(name)
            return result

        async def steps():
            yield step("S1", Ok(1))
            yield step("S2", Err("S2 failed"))
            yield step("S3", Ok(3))

        assert await run_async(steps) == Err("S2 failed")
        assert invoked == ["S1", "S2"]

    @pytest.mark.asyncio
    async def test_steps_run_sequentially(self) -> None:
        events: list[str] = []

        async def step(name: str) -> Result[str, str]:
            events.append(f"{name} start")
            await asyncio.sleep(0)
            events.append(f"{name} end")
            return Ok(name)

        async def steps():
            a = yield step("a")
            b = yield step("b")
            yield Return(a + b)

        assert await run_async(steps) == Ok("ab")
        assert events == ["a start", "a end", "b start", "b end"]

    @pytest.mark.asyncio
    async def test_awaitable_plain_value_becomes_ok(self) -> None:
        async def fetch() -> int:
            return 7

        async def steps():
            value = yield fetch()
            yield Return(value + 1)

        assert await run_async(steps) == Ok(8)

    @pytest.mark.asyncio
    async def test_strict_rejects_awaited_plain_value(self) -> None:
        async def fetch() -> int:
            return 7

        async def steps():
            yield fetch()

        with pytest.raises(Panic, match="expected a Result"):
            await run_async(steps, strict=True)

    @pytest.mark.asyncio
    async def test_running_off_the_end_is_ok_none(self) -> None:
        async def steps():
            yield Ok(1)

        assert await run_async(steps) == Ok(None)

    @pytest.mark.asyncio
    async def test_plain_yield_terminates(self) -> None:
        async def steps():
            x = yield Ok(20)
            yield x + 1
            pytest.fail("not resumed after plain yield")

        assert await run_async(steps) == Ok(21)

    @pytest.mark.asyncio
    async def test_return_marker_with_deferred_value(self) -> None:
        async def steps():
            yield Ok(1)
            yield Return(DeferredResult(divide_later(1, 0)))

        assert await run_async(steps) == Err("division by zero")

    @pytest.mark.asyncio
    async def test_closes_generator_on_err(self) -> None:
        cleaned: list[bool] = []

        async def steps():
            try:
                yield Err("stop")
            finally:
                cleaned.append(True)

        assert await run_async(steps) == Err("stop")
        assert cleaned == [True]

    @pytest.mark.asyncio
    async def test_nothing_runs_until_awaited(self) -> None:
        started: list[bool] = []

        async def steps():
            started.append(True)
            yield Ok(1)

        deferred = run_async(steps)
        await asyncio.sleep(0)
        assert started == []
        await deferred
        assert started == [True]

    @pytest.mark.asyncio
    async def test_exceptions_reject_the_deferred(self) -> None:
        async def steps():
            yield Ok(1)
            raise ValueError("host failure")

        with pytest.raises(ValueError, match="host failure"):
            await run_async(steps)

    @pytest.mark.asyncio
    async def test_composes_downstream(self) -> None:
        async def steps():
            x = yield Ok(4)
            yield Return(x)

        assert await run_async(steps).map(lambda x: x * 10).unwrap() == 40

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", [logging.DEBUG, logging.WARNING])
    async def test_short_circuits_on_exception_with_own_info_method(
        self, level: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        error = HTTPError("http://example.test", 503, "Unavailable", Message(), None)

        async def steps():
            yield DeferredResult.of(Err(error))

        with caplog.at_level(level, logger="resultflow.run"):
            assert await run_async(steps) == Err(error)

    @pytest.mark.asyncio
    async def test_payload_not_rendered_unless_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        async def steps():
            yield Err(Unprintable())

        with caplog.at_level(logging.WARNING, logger="resultflow.run"):
            assert (await run_async(steps)).is_err()
