"""Unit tests for Ticker (periodic timer).

Tests cover:
- First tick arrives after one interval, not immediately
- Fixed cadence over several ticks
- Cancellation wins and returns promptly
- Slow consumers get one pending tick, never a burst
- Background task released on exit, including on error
"""

import asyncio
from datetime import timedelta

import pytest

from src.core.ticker import Ticker

INTERVAL = 0.05
TOLERANCE = 0.01


@pytest.mark.unit
class TestTickerCadence:
    """Test tick timing."""

    async def test_first_tick_after_one_interval(self):
        loop = asyncio.get_running_loop()
        cancelled = asyncio.Event()

        async with Ticker(timedelta(seconds=INTERVAL)) as ticker:
            started = loop.time()
            assert await ticker.wait(cancelled) is True
            elapsed = loop.time() - started

        assert elapsed >= INTERVAL - TOLERANCE

    async def test_ticks_follow_fixed_cadence(self):
        loop = asyncio.get_running_loop()
        cancelled = asyncio.Event()

        async with Ticker(timedelta(seconds=INTERVAL)) as ticker:
            started = loop.time()
            for _ in range(4):
                assert await ticker.wait(cancelled)
            elapsed = loop.time() - started

        assert elapsed >= 4 * INTERVAL - TOLERANCE

    async def test_slow_consumer_gets_single_pending_tick(self):
        """Test missed ticks are dropped rather than replayed as a burst."""
        loop = asyncio.get_running_loop()
        cancelled = asyncio.Event()

        async with Ticker(timedelta(seconds=INTERVAL)) as ticker:
            await asyncio.sleep(INTERVAL * 5.5)

            # One tick is buffered and returns immediately...
            before = loop.time()
            assert await ticker.wait(cancelled)
            assert loop.time() - before < INTERVAL / 2

            # ...the next one waits for the schedule again.
            before = loop.time()
            assert await ticker.wait(cancelled)
            assert loop.time() - before >= INTERVAL / 5

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            Ticker(timedelta(0))


@pytest.mark.unit
class TestTickerCancellation:
    """Test select between tick and cancellation."""

    async def test_already_cancelled_returns_false(self):
        cancelled = asyncio.Event()
        cancelled.set()

        async with Ticker(timedelta(seconds=INTERVAL)) as ticker:
            assert await ticker.wait(cancelled) is False

    async def test_cancellation_interrupts_wait(self):
        loop = asyncio.get_running_loop()
        cancelled = asyncio.Event()

        async with Ticker(timedelta(seconds=10)) as ticker:
            loop.call_later(0.02, cancelled.set)
            started = loop.time()
            assert await ticker.wait(cancelled) is False

        assert loop.time() - started < 1.0


@pytest.mark.unit
class TestTickerResources:
    """Test background task lifecycle."""

    async def test_task_released_on_exit(self):
        ticker = Ticker(timedelta(seconds=INTERVAL))

        async with ticker:
            assert ticker.running

        assert not ticker.running

    async def test_task_released_when_body_raises(self):
        ticker = Ticker(timedelta(seconds=INTERVAL))

        with pytest.raises(RuntimeError):
            async with ticker:
                raise RuntimeError("boom")

        assert not ticker.running

    async def test_stop_is_idempotent(self):
        ticker = Ticker(timedelta(seconds=INTERVAL))
        ticker.start()

        await ticker.stop()
        await ticker.stop()

        assert not ticker.running
