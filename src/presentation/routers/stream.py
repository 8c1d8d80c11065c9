"""Number stream endpoint.

Streams a monotonically increasing integer sequence via Server-Sent Events.

Request contract:
    GET /stream?intervalMs=<ms>&start=<n>&limit=<n>
    Last-Event-ID: <n>            (sent by EventSource on reconnect)

All inputs are taken as raw strings and normalized by StreamParameters;
a malformed value never produces a 4xx. The only rejection is a transport
that cannot flush, which fails with 500 before any bytes are streamed.
"""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Query, Request

from src.application.services import StreamSession
from src.core.constants import LAST_EVENT_ID_HEADER, SSE_RESPONSE_HEADERS
from src.core.container import (
    get_event_transport_factory,
    get_logger,
    get_stream_config,
)
from src.domain.errors import StreamingUnsupportedError
from src.domain.protocols import (
    EventEncoderProtocol,
    EventTransportFactoryProtocol,
    LoggerProtocol,
)
from src.domain.value_objects import StreamConfig, StreamParameters
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.responses import EventStreamResponse

stream_router = APIRouter(tags=["Stream"])


@stream_router.get("/stream", response_class=EventStreamResponse)
async def stream_numbers(
    request: Request,
    config: Annotated[StreamConfig, Depends(get_stream_config)],
    transport_factory: Annotated[
        EventTransportFactoryProtocol, Depends(get_event_transport_factory)
    ],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
    interval_ms: Annotated[
        str | None,
        Query(
            alias="intervalMs",
            description="Milliseconds between events (positive integer). "
            "Invalid or absent values use the configured default.",
        ),
    ] = None,
    start: Annotated[
        str | None,
        Query(
            description="First sequence value (non-negative integer). "
            "Takes precedence over Last-Event-ID.",
        ),
    ] = None,
    limit: Annotated[
        str | None,
        Query(
            description="Number of events before the server closes the stream. "
            "Absent, invalid or 0 means unbounded.",
        ),
    ] = None,
    last_event_id: Annotated[
        str | None,
        Header(
            alias=LAST_EVENT_ID_HEADER,
            description="Last received event id; the stream resumes at id + 1.",
        ),
    ] = None,
) -> EventStreamResponse:
    """Stream sequence numbers via Server-Sent Events (SSE).

    Each event carries the current sequence value as both ``id`` and
    ``data`` with event type ``number``. The stream starts with a
    ``retry`` hint and ends when the client disconnects, the limit is
    reached, or the server shuts down.

    Returns:
        EventStreamResponse with SSE content type.

    Raises:
        StreamingUnsupportedError: If the transport cannot flush incrementally.
    """
    if not transport_factory.supports_flush:
        raise StreamingUnsupportedError()

    parameters = StreamParameters.resolve(
        config,
        interval_ms=interval_ms,
        start=start,
        limit=limit,
        last_event_id=last_event_id,
    )
    session_logger = logger.bind(
        trace_id=get_trace_id(),
        client=request.client.host if request.client else None,
    )

    async def run_session(
        encoder: EventEncoderProtocol, cancelled: asyncio.Event
    ) -> None:
        session = StreamSession(
            parameters=parameters,
            config=config,
            encoder=encoder,
            cancelled=cancelled,
            logger=session_logger,
        )
        await session.run()

    return EventStreamResponse(
        run_session,
        transport_factory=transport_factory,
        logger=session_logger,
        shutdown_event=getattr(request.app.state, "shutdown_event", None),
        headers=SSE_RESPONSE_HEADERS,
    )
