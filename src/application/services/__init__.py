"""Application services."""

from src.application.services.stream_session import (
    SessionEndReason,
    SessionOutcome,
    StreamSession,
)

__all__ = ["SessionEndReason", "SessionOutcome", "StreamSession"]
