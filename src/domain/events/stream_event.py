"""Event units emitted on a sequence stream.

An event unit is the transient value handed from the session driver to the
encoder on every tick. It is created fresh for each tick and never retained.

Wire mapping (text/event-stream):
    id: <event_id>
    event: <event_type>
    data: <data>

Reference:
    - https://html.spec.whatwg.org/multipage/server-sent-events.html
"""

from dataclasses import dataclass
from enum import StrEnum


class StreamEventType(StrEnum):
    """SSE event type tags (Single Source of Truth)."""

    NUMBER = "number"
    """One value of the per-connection integer sequence."""


@dataclass(frozen=True, kw_only=True, slots=True)
class SequenceEvent:
    """A single event unit carrying one sequence value.

    Attributes:
        event_id: Decimal form of the sequence value. Clients echo it back
            in Last-Event-ID to resume after a disconnect.
        event_type: Type tag identifying the event kind.
        data: Decimal form of the sequence value (identical to event_id so
            that resuming by id and reading the value agree).
    """

    event_id: str
    event_type: str
    data: str

    @classmethod
    def from_sequence(
        cls,
        sequence: int,
        event_type: str = StreamEventType.NUMBER,
    ) -> "SequenceEvent":
        """Build the event unit for a sequence value.

        Args:
            sequence: Current sequence value (non-negative).
            event_type: Type tag for the event.

        Returns:
            SequenceEvent with id and data set to the decimal sequence.
        """
        value = str(sequence)
        return cls(event_id=value, event_type=str(event_type), data=value)
