"""Unit tests for EventStreamResponse.

Drives the response as a raw ASGI app so unbounded streams can be observed
and cancelled without an HTTP client buffering the body.

Tests cover:
- Response start carries status and SSE headers
- Client disconnect cancels the session
- Server shutdown cancels the session
- Body ended after the session returns
- Lost connection does not raise out of the response
"""

import asyncio

import pytest

from src.application.services import SessionEndReason, StreamSession
from src.domain.value_objects import StartSource, StreamParameters
from src.infrastructure.sse import ASGIEventTransportFactory
from src.presentation.responses import EventStreamResponse
from tests.utils.stream_fakes import RecordingSend, make_receive, parse_sse

SCOPE = {"type": "http", "method": "GET", "path": "/stream", "headers": []}


def make_runner(stream_config, logger, outcomes, *, limit=0, start=0):
    parameters = StreamParameters(
        start=start,
        start_source=StartSource.DEFAULT,
        interval_ms=10,
        limit=limit,
    )

    async def runner(encoder, cancelled):
        session = StreamSession(
            parameters=parameters,
            config=stream_config,
            encoder=encoder,
            cancelled=cancelled,
            logger=logger,
        )
        outcomes.append(await session.run())

    return runner


def make_response(runner, logger, **kwargs):
    return EventStreamResponse(
        runner,
        transport_factory=ASGIEventTransportFactory(),
        logger=logger,
        headers={"Cache-Control": "no-cache"},
        **kwargs,
    )


@pytest.mark.unit
class TestEventStreamResponse:
    """Test response lifecycle."""

    async def test_start_message_has_sse_headers(self, stream_config, mock_logger):
        outcomes = []
        send = RecordingSend()
        response = make_response(
            make_runner(stream_config, mock_logger, outcomes, limit=1), mock_logger
        )

        await response(SCOPE, make_receive(), send)

        start = send.messages[0]
        headers = dict(start["headers"])
        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        assert headers[b"content-type"] == b"text/event-stream; charset=utf-8"
        assert headers[b"cache-control"] == b"no-cache"

    async def test_limit_reached_ends_body(self, stream_config, mock_logger):
        outcomes = []
        send = RecordingSend()
        response = make_response(
            make_runner(stream_config, mock_logger, outcomes, limit=2, start=3),
            mock_logger,
        )

        await response(SCOPE, make_receive(), send)

        blocks = parse_sse(send.body.decode())
        assert blocks[0] == {"retry": "1000"}
        assert [b["id"] for b in blocks[1:]] == ["3", "4"]
        assert send.ended
        assert outcomes[0].reason == SessionEndReason.LIMIT_REACHED

    async def test_client_disconnect_cancels_stream(self, stream_config, mock_logger):
        outcomes = []
        disconnect = asyncio.Event()
        send = RecordingSend()
        response = make_response(
            make_runner(stream_config, mock_logger, outcomes), mock_logger
        )
        asyncio.get_running_loop().call_later(0.05, disconnect.set)

        await asyncio.wait_for(response(SCOPE, make_receive(disconnect), send), 2)

        assert outcomes[0].reason == SessionEndReason.CANCELLED
        ids = [int(b["id"]) for b in parse_sse(send.body.decode()) if "id" in b]
        assert ids == list(range(len(ids)))

    async def test_shutdown_cancels_stream(self, stream_config, mock_logger):
        outcomes = []
        shutdown = asyncio.Event()
        send = RecordingSend()
        response = make_response(
            make_runner(stream_config, mock_logger, outcomes),
            mock_logger,
            shutdown_event=shutdown,
        )
        asyncio.get_running_loop().call_later(0.05, shutdown.set)

        await asyncio.wait_for(response(SCOPE, make_receive(), send), 2)

        assert outcomes[0].reason == SessionEndReason.CANCELLED
        assert send.ended

    async def test_lost_connection_ends_quietly(self, stream_config, mock_logger):
        outcomes = []
        send = RecordingSend(fail_on_body=3)
        response = make_response(
            make_runner(stream_config, mock_logger, outcomes), mock_logger
        )

        await asyncio.wait_for(response(SCOPE, make_receive(), send), 2)

        assert outcomes[0].reason == SessionEndReason.WRITE_FAILED
        assert outcomes[0].emitted == 1
        assert not send.ended

    async def test_background_task_runs_after_body(self, stream_config, mock_logger):
        from starlette.background import BackgroundTask

        ran = []
        response = make_response(
            make_runner(stream_config, mock_logger, [], limit=1),
            mock_logger,
            background=BackgroundTask(ran.append, "done"),
        )

        await response(SCOPE, make_receive(), RecordingSend())

        assert ran == ["done"]
