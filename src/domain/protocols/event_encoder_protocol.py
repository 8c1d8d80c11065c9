"""Event Encoder Protocol.

The encoder is the formatting and transmission boundary between the session
driver and the transport. It never advances the sequence itself.

Architecture:
    - Protocol-based (structural typing, no inheritance)
    - One encoder per connection
    - Every call ends with a flush so the client sees data immediately
"""

from typing import Protocol


class EventEncoderProtocol(Protocol):
    """Protocol for writing SSE directives to a connection.

    Example:
        >>> encoder: EventEncoderProtocol = SSEEventEncoder(transport)
        >>> await encoder.write_retry(1000)
        >>> await encoder.write_event("number", "7", "7")
    """

    async def write_retry(self, milliseconds: int) -> None:
        """Write the reconnection delay hint and flush.

        Args:
            milliseconds: Delay the client should wait before reconnecting.

        Raises:
            EventWriteError: If the underlying transport write fails.
        """
        ...

    async def write_event(self, event_type: str, data: str, event_id: str = "") -> None:
        """Write one event unit and flush.

        Args:
            event_type: Type tag (line omitted when empty).
            data: Payload (always written).
            event_id: Identifier (line omitted when empty).

        Raises:
            EventWriteError: If any underlying write fails. Lines already
                written are not rolled back.
        """
        ...
