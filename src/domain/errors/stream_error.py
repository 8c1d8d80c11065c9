"""Stream error types.

Unlike validation failures (which are silently normalized), these errors
represent conditions a stream cannot recover from:

- EventWriteError: The transport refused a write or flush. Fatal to the
  session only; the client is presumed gone and nothing is retried.
- StreamingUnsupportedError: The transport cannot flush incrementally.
  Raised before streaming begins and surfaced as a 500 response.

These are raised at the transport boundary and handled by the session or
the exception handlers.
"""


class StreamError(Exception):
    """Base exception for event stream failures."""

    pass


class EventWriteError(StreamError):
    """Writing or flushing to the event transport failed."""

    pass


class StreamingUnsupportedError(StreamError):
    """The transport does not support incremental flushing."""

    def __init__(self, message: str = "streaming unsupported") -> None:
        super().__init__(message)
        self.message = message
