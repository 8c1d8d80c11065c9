"""Event stream response.

Runs one stream session against an ASGI connection. The session is driven
in the response task while two watchers translate outside signals into the
session's cancellation event:

- the client disconnecting (``http.disconnect`` on receive)
- the server shutting down (an optional process-wide shutdown event)

Either watcher sets ``cancelled``; the session observes it at its next wait
and stops writing. Watchers are cancelled once the session returns, then the
response body is ended unless the connection is already gone.
"""

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from starlette.background import BackgroundTask
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from src.domain.errors import EventWriteError
from src.domain.protocols import (
    EventEncoderProtocol,
    EventTransportFactoryProtocol,
    LoggerProtocol,
)
from src.infrastructure.sse.event_encoder import SSEEventEncoder

SessionRunner = Callable[[EventEncoderProtocol, asyncio.Event], Awaitable[Any]]
"""Callable running one session given its encoder and cancellation event."""


class EventStreamResponse(Response):
    """Streaming ``text/event-stream`` response driven by a session runner.

    Args:
        runner: Coroutine function running the session.
        transport_factory: Creates the byte transport for this response.
        logger: Logger bound with request context.
        shutdown_event: Process-wide shutdown signal, if the app has one.
        status_code: HTTP status code.
        headers: Extra response headers.
        background: Optional task run after the body ends.
    """

    media_type = "text/event-stream"

    def __init__(
        self,
        runner: SessionRunner,
        *,
        transport_factory: EventTransportFactoryProtocol,
        logger: LoggerProtocol,
        shutdown_event: asyncio.Event | None = None,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        self.runner = runner
        self.transport_factory = transport_factory
        self.logger = logger
        self.shutdown_event = shutdown_event
        self.status_code = status_code
        self.background = background
        self.init_headers(headers)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await send(
            {
                "type": "http.response.start",
                "status": self.status_code,
                "headers": self.raw_headers,
            }
        )

        cancelled = asyncio.Event()
        transport = self.transport_factory.create(send)
        watchers = [
            asyncio.create_task(self._listen_for_disconnect(receive, cancelled))
        ]
        if self.shutdown_event is not None:
            watchers.append(
                asyncio.create_task(
                    self._listen_for_shutdown(self.shutdown_event, cancelled)
                )
            )

        try:
            await self.runner(SSEEventEncoder(transport), cancelled)
        finally:
            for watcher in watchers:
                watcher.cancel()
            await asyncio.wait(watchers)

        if not transport.closed:
            try:
                await transport.close()
            except EventWriteError as e:
                self.logger.debug("Stream close not delivered", error_message=str(e))

        if self.background is not None:
            await self.background()

    @staticmethod
    async def _listen_for_disconnect(receive: Receive, cancelled: asyncio.Event) -> None:
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                cancelled.set()
                return

    @staticmethod
    async def _listen_for_shutdown(
        shutdown_event: asyncio.Event, cancelled: asyncio.Event
    ) -> None:
        await shutdown_event.wait()
        cancelled.set()
