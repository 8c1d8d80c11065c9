"""Stream event types.

Usage:
    >>> from src.domain.events import SequenceEvent, StreamEventType
    >>> event = SequenceEvent.from_sequence(42)
    >>> event.event_id, event.data
    ('42', '42')
"""

from src.domain.events.stream_event import SequenceEvent, StreamEventType

__all__ = ["SequenceEvent", "StreamEventType"]
