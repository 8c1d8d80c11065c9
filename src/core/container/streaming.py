"""Streaming dependency factories.

Application-scoped singletons for the event stream endpoint:
- get_stream_config(): Immutable stream defaults built from Settings once
- get_event_transport_factory(): Factory creating one transport per response

Sessions themselves are never shared; only these immutable collaborators are.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_transport_protocol import (
        EventTransportFactoryProtocol,
    )
    from src.domain.value_objects.stream_config import StreamConfig


@lru_cache()
def get_stream_config() -> "StreamConfig":
    """Get stream configuration singleton (app-scoped).

    Returns:
        StreamConfig resolved from Settings.

    Usage:
        # Presentation Layer (FastAPI Depends)
        config: StreamConfig = Depends(get_stream_config)
    """
    from src.core.config import get_settings
    from src.domain.events.stream_event import StreamEventType
    from src.domain.value_objects.stream_config import StreamConfig

    settings = get_settings()

    return StreamConfig(
        default_interval_ms=settings.stream_interval_ms,
        retry_ms=settings.stream_retry_ms,
        event_type=StreamEventType.NUMBER,
    )


@lru_cache()
def get_event_transport_factory() -> "EventTransportFactoryProtocol":
    """Get event transport factory singleton (app-scoped).

    Returns:
        Factory creating ASGI transports (stateless, safe to share).
    """
    from src.infrastructure.sse.asgi_transport import ASGIEventTransportFactory

    return ASGIEventTransportFactory()
