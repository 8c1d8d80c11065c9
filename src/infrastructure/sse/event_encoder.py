"""SSE wire encoder.

Wire Format (text/event-stream):
    retry: <reconnect_ms>\\n\\n

    id: <event_id>\\n          (omitted when empty)
    event: <event_type>\\n     (omitted when empty)
    data: <payload>\\n\\n

A multi-line payload is written as one ``data:`` line per line (CRLF, CR and
LF all end a line), which clients join back with newlines.
"""

import re

from src.domain.protocols import EventTransportProtocol

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SSEEventEncoder:
    """Encodes SSE directives onto a transport.

    Implements EventEncoderProtocol. Each operation writes its lines and then
    flushes, so nothing sits in a server-side buffer between ticks.

    Args:
        transport: Byte sink for one connection.
    """

    def __init__(self, transport: EventTransportProtocol) -> None:
        self._transport = transport

    async def write_retry(self, milliseconds: int) -> None:
        """Write the reconnection delay hint.

        Args:
            milliseconds: Delay the client should wait before reconnecting.

        Raises:
            EventWriteError: If the transport write or flush fails.
        """
        await self._transport.write(f"retry: {milliseconds}\n\n")
        await self._transport.flush()

    async def write_event(self, event_type: str, data: str, event_id: str = "") -> None:
        """Write one event unit.

        Args:
            event_type: Type tag (line omitted when empty).
            data: Payload (always written).
            event_id: Identifier (line omitted when empty).

        Raises:
            EventWriteError: If any write fails. Already-written lines of the
                unit are not rolled back.
        """
        if event_id:
            await self._transport.write(f"id: {event_id}\n")
        if event_type:
            await self._transport.write(f"event: {event_type}\n")
        for line in _LINE_BREAK.split(data):
            await self._transport.write(f"data: {line}\n")
        await self._transport.write("\n")
        await self._transport.flush()
