"""Custom ASGI responses."""

from src.presentation.responses.event_stream import EventStreamResponse, SessionRunner

__all__ = ["EventStreamResponse", "SessionRunner"]
