"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Stream defaults: Fallbacks used when configuration is unusable
- Headers: Request/response header names used by the stream endpoint

Example:
    >>> from src.core.constants import STREAM_INTERVAL_MS_DEFAULT
    >>> interval = timedelta(milliseconds=STREAM_INTERVAL_MS_DEFAULT)
"""

from datetime import timedelta

# =============================================================================
# Stream Defaults
# =============================================================================

STREAM_INTERVAL_MS_DEFAULT: int = 100
"""Built-in emission interval used when the configured default is malformed."""

STREAM_INTERVAL_MS_MAX: int = timedelta.max // timedelta(milliseconds=1)
"""Largest interval representable as a timedelta; longer values are malformed."""

SSE_RETRY_INTERVAL_MS: int = 1000
"""Client reconnection interval hint (milliseconds)."""

STREAM_UNBOUNDED: int = 0
"""Limit sentinel meaning "no cap on emitted events"."""


# =============================================================================
# Headers
# =============================================================================

LAST_EVENT_ID_HEADER: str = "Last-Event-ID"
"""Header an EventSource client sends on reconnection."""

TRACE_ID_HEADER: str = "X-Trace-Id"
"""Request correlation header (echoed on every response)."""

SSE_RESPONSE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx/Traefik buffering
}
"""Headers sent with every event stream response."""
