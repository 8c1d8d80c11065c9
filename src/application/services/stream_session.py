"""Per-connection stream session driver.

Owns one connection's lifecycle: sends the retry hint, runs the timed
emission loop, and enforces termination.

Loop:
    1. Write the retry hint once (advisory; a failure is ignored).
    2. Wait for whichever of {tick, cancellation} comes first.
       - Cancellation: stop, no further writes.
       - Tick: encode the event for the current sequence. A write failure
         stops the session; otherwise the sequence advances by one and the
         emitted count is checked against the limit.

Architecture:
    - One session per connection; sessions share no mutable state
    - Depends only on the encoder port, never on the transport
    - The ticker is the only owned resource, released on every exit path

Usage:
    session = StreamSession(
        parameters=params,
        config=config,
        encoder=SSEEventEncoder(transport),
        cancelled=cancelled,
        logger=logger,
    )
    outcome = await session.run()
"""

import asyncio
from dataclasses import dataclass
from enum import StrEnum

from src.core.ticker import Ticker
from src.domain.errors import EventWriteError
from src.domain.events import SequenceEvent
from src.domain.protocols import EventEncoderProtocol, LoggerProtocol
from src.domain.value_objects import StreamConfig, StreamParameters


class SessionEndReason(StrEnum):
    """Why a session stopped emitting."""

    CANCELLED = "cancelled"
    LIMIT_REACHED = "limit_reached"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True, kw_only=True, slots=True)
class SessionOutcome:
    """Summary of a finished session.

    Attributes:
        reason: Terminal condition that ended the loop.
        emitted: Number of events successfully written.
        next_sequence: Sequence value the session would have emitted next.
    """

    reason: SessionEndReason
    emitted: int
    next_sequence: int


class StreamSession:
    """Drives the emission loop for one connection.

    Args:
        parameters: Resolved start, interval, and limit.
        config: Process-wide stream configuration (retry hint, type tag).
        encoder: Encoder bound to this connection.
        cancelled: Set by the transport context on disconnect or shutdown.
        logger: Logger, typically bound with request context.
    """

    def __init__(
        self,
        *,
        parameters: StreamParameters,
        config: StreamConfig,
        encoder: EventEncoderProtocol,
        cancelled: asyncio.Event,
        logger: LoggerProtocol,
    ) -> None:
        self._parameters = parameters
        self._config = config
        self._encoder = encoder
        self._cancelled = cancelled
        self._logger = logger
        self._sequence = parameters.start
        self._emitted = 0

    @property
    def sequence(self) -> int:
        """Next sequence value to emit."""
        return self._sequence

    @property
    def emitted(self) -> int:
        """Events written so far."""
        return self._emitted

    async def run(self) -> SessionOutcome:
        """Run the session until cancellation, limit, or write failure.

        Returns:
            SessionOutcome describing how the session ended.
        """
        self._logger.info(
            "Stream session opened",
            start=self._parameters.start,
            start_source=self._parameters.start_source.value,
            interval_ms=self._parameters.interval_ms,
            limit=self._parameters.limit,
        )

        try:
            await self._encoder.write_retry(self._config.retry_ms)
        except EventWriteError as e:
            self._logger.debug("Retry hint not delivered", error_message=str(e))

        async with Ticker(self._parameters.interval) as ticker:
            reason = await self._emit_until_done(ticker)

        outcome = SessionOutcome(
            reason=reason,
            emitted=self._emitted,
            next_sequence=self._sequence,
        )
        self._logger.info(
            "Stream session ended",
            reason=outcome.reason.value,
            emitted=outcome.emitted,
            next_sequence=outcome.next_sequence,
        )
        return outcome

    async def _emit_until_done(self, ticker: Ticker) -> SessionEndReason:
        while True:
            if not await ticker.wait(self._cancelled):
                return SessionEndReason.CANCELLED

            event = SequenceEvent.from_sequence(
                self._sequence, self._config.event_type
            )
            try:
                await self._encoder.write_event(
                    event.event_type, event.data, event.event_id
                )
            except EventWriteError as e:
                self._logger.info(
                    "Stream write failed, closing session",
                    sequence=self._sequence,
                    error_message=str(e),
                )
                return SessionEndReason.WRITE_FAILED

            self._sequence += 1
            self._emitted += 1
            if (
                self._parameters.is_bounded
                and self._emitted >= self._parameters.limit
            ):
                return SessionEndReason.LIMIT_REACHED
