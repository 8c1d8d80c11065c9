"""External-facing routers.

- system_router: index and health endpoints
- stream_router: the per-connection number event stream

Both are non-versioned: the stream URL and its query parameters are the
public contract EventSource clients are built against.
"""

from src.presentation.routers.stream import stream_router
from src.presentation.routers.system import system_router

__all__ = ["stream_router", "system_router"]
