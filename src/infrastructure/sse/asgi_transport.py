"""ASGI event transport.

Buffers encoder output and delivers it as ``http.response.body`` messages
with ``more_body=True``. One flush is one body message, so the ASGI server
writes each event to the socket as soon as it is produced.

Servers signal a vanished client by raising from ``send`` (uvicorn raises
``ClientDisconnected``, an OSError). Any such failure closes the transport
and is re-raised as EventWriteError.
"""

from src.domain.errors import EventWriteError
from src.domain.protocols.event_transport_protocol import Send


class ASGIEventTransport:
    """Append-only transport writing to an ASGI ``send`` callable.

    Implements EventTransportProtocol. The response start message is sent by
    the caller; this transport only produces body messages.

    Args:
        send: ASGI send callable.
        encoding: Text encoding for written chunks.
    """

    def __init__(self, send: Send, *, encoding: str = "utf-8") -> None:
        self._send = send
        self._encoding = encoding
        self._buffer = bytearray()
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once the body has ended or a delivery failed."""
        return self._closed

    async def write(self, chunk: str) -> None:
        if self._closed:
            raise EventWriteError("transport is closed")
        self._buffer.extend(chunk.encode(self._encoding))

    async def flush(self) -> None:
        if self._closed:
            raise EventWriteError("transport is closed")
        if not self._buffer:
            return
        body = bytes(self._buffer)
        self._buffer.clear()
        await self._deliver(body, more_body=True)

    async def close(self) -> None:
        if self._closed:
            return
        body = bytes(self._buffer)
        self._buffer.clear()
        await self._deliver(body, more_body=False)
        self._closed = True

    async def _deliver(self, body: bytes, *, more_body: bool) -> None:
        try:
            await self._send(
                {"type": "http.response.body", "body": body, "more_body": more_body}
            )
        except OSError as e:
            self._closed = True
            raise EventWriteError(f"client connection lost: {e}") from e


class ASGIEventTransportFactory:
    """Creates an ASGIEventTransport per response.

    Implements EventTransportFactoryProtocol. ASGI body messages are always
    delivered incrementally, so ``supports_flush`` is True.
    """

    supports_flush: bool = True

    def create(self, send: Send) -> ASGIEventTransport:
        return ASGIEventTransport(send)
