"""Domain errors package.

Exports stream error classes for convenient importing.

Usage:
    from src.domain.errors import EventWriteError, StreamingUnsupportedError
"""

from src.domain.errors.stream_error import (
    EventWriteError,
    StreamError,
    StreamingUnsupportedError,
)

__all__ = [
    "EventWriteError",
    "StreamError",
    "StreamingUnsupportedError",
]
