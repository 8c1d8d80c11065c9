"""Process-wide stream configuration.

Built once at startup by the container from Settings and injected into every
session. The streaming core reads only this value, never the environment.
"""

from dataclasses import dataclass

from src.core.constants import SSE_RETRY_INTERVAL_MS
from src.domain.events.stream_event import StreamEventType


@dataclass(frozen=True, kw_only=True, slots=True)
class StreamConfig:
    """Immutable stream defaults.

    Attributes:
        default_interval_ms: Raw configured default interval. Kept as a string
            because it is normalized per session like any other input.
        retry_ms: Reconnection delay hint sent at the start of each stream.
        event_type: Type tag attached to every emitted event.
    """

    default_interval_ms: str
    retry_ms: int = SSE_RETRY_INTERVAL_MS
    event_type: str = StreamEventType.NUMBER
