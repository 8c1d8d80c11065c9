"""Trace middleware to inject a trace_id per request.

- Adds X-Trace-Id response header
- Stores the trace ID on ``request.state.trace_id``
- Exposes get_trace_id() helper for logging calls outside request handlers

Written as a pure ASGI middleware: the response body passes through
untouched, so streamed events reach the client as soon as they are sent and
disconnect messages reach the endpoint unchanged.
"""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.core.constants import TRACE_ID_HEADER

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID.

    Returns None when called outside of request context.

    Returns:
        str | None: The current request trace ID, or None if no active request.
    """
    return trace_id_context.get()


class TraceMiddleware:
    """ASGI middleware that injects a trace ID into each HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Set and propagate a trace ID for HTTP requests.

        Args:
            scope (Scope): ASGI connection scope.
            receive (Receive): ASGI receive callable.
            send (Send): ASGI send callable.
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        trace_id = Headers(scope=scope).get(TRACE_ID_HEADER) or str(uuid4())
        scope.setdefault("state", {})["trace_id"] = trace_id

        async def send_with_trace_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[TRACE_ID_HEADER] = trace_id
            await send(message)

        token = trace_id_context.set(trace_id)
        try:
            await self.app(scope, receive, send_with_trace_id)
        finally:
            # Clear context after request to prevent leakage
            trace_id_context.reset(token)
