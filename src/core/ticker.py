"""Periodic tick source for timed emission loops.

A Ticker fires on a fixed schedule (start + n * interval) from a background
task and holds at most one undelivered tick. When the consumer falls behind,
surplus ticks are dropped: the consumer sees one pending tick immediately and
then returns to the normal cadence, never a burst of catch-up ticks.

The background task is the ticker's only resource. Use the ticker as an async
context manager so the task is cancelled on every exit path.

Usage:
    async with Ticker(timedelta(milliseconds=250)) as ticker:
        while await ticker.wait(cancelled):
            ...  # one unit of work per tick
"""

from __future__ import annotations

import asyncio
from datetime import timedelta
from types import TracebackType


class Ticker:
    """Fixed-rate ticker with a single-slot buffer.

    Args:
        interval: Time between ticks. Must be positive.

    Raises:
        ValueError: If interval is not positive.
    """

    def __init__(self, interval: timedelta) -> None:
        seconds = interval.total_seconds()
        if seconds <= 0:
            raise ValueError("interval must be positive")
        self._interval = seconds
        self._ticks: asyncio.Queue[float] = asyncio.Queue(maxsize=1)
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        """True while the background timer task is alive."""
        return self._task is not None and not self._task.done()

    async def __aenter__(self) -> Ticker:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    def start(self) -> None:
        """Start the background timer task (idempotent)."""
        if self._task is None:
            self._task = asyncio.create_task(self._run(), name="ticker")

    async def stop(self) -> None:
        """Cancel the timer task and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        await asyncio.wait({task})

    async def wait(self, cancelled: asyncio.Event) -> bool:
        """Block until the next tick or until ``cancelled`` is set.

        Cancellation wins when both are ready.

        Args:
            cancelled: Cancellation signal for the caller.

        Returns:
            True when a tick fired, False when cancelled.
        """
        if cancelled.is_set():
            return False

        tick = asyncio.ensure_future(self._ticks.get())
        stop = asyncio.ensure_future(cancelled.wait())
        try:
            await asyncio.wait({tick, stop}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            tick.cancel()
            stop.cancel()

        if cancelled.is_set():
            return False
        return tick.done() and not tick.cancelled()

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            deadline += self._interval
            await asyncio.sleep(max(0.0, deadline - loop.time()))

            now = loop.time()
            if now - deadline >= self._interval:
                # Missed whole periods; re-anchor instead of replaying them.
                deadline = now

            if self._ticks.full():
                continue
            self._ticks.put_nowait(now)
