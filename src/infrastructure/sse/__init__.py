"""SSE Infrastructure adapters package.

This package contains the wire-level pieces of an event stream:
- SSEEventEncoder: Formats retry hints and events (text/event-stream)
- ASGIEventTransport: Buffers encoder output and flushes it as ASGI body chunks
- ASGIEventTransportFactory: Builds a transport per response

Architecture:
    - Implements domain protocols without inheritance (structural typing)
    - Every encoder call ends with an explicit flush
    - Transport failures surface as EventWriteError

Reference:
    - https://html.spec.whatwg.org/multipage/server-sent-events.html
"""

from src.infrastructure.sse.asgi_transport import (
    ASGIEventTransport,
    ASGIEventTransportFactory,
)
from src.infrastructure.sse.event_encoder import SSEEventEncoder

__all__ = [
    "ASGIEventTransport",
    "ASGIEventTransportFactory",
    "SSEEventEncoder",
]
