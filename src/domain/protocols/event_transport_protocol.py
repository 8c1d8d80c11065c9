"""Event Transport Protocol.

A transport is the byte sink under an encoder: an append-only stream that
buffers writes until flushed. Transports report write failures as
EventWriteError so callers never depend on server-specific exceptions.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, Protocol

Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]
"""ASGI send callable (structurally identical to starlette.types.Send)."""


class EventTransportProtocol(Protocol):
    """Append-only, flushable byte sink for one connection."""

    @property
    def closed(self) -> bool:
        """True once the transport is finished or has failed."""
        ...

    async def write(self, chunk: str) -> None:
        """Append text to the pending buffer.

        Raises:
            EventWriteError: If the transport is already closed.
        """
        ...

    async def flush(self) -> None:
        """Deliver buffered bytes to the client.

        Raises:
            EventWriteError: If delivery fails. The transport is then closed.
        """
        ...

    async def close(self) -> None:
        """Flush remaining bytes and end the response body.

        Raises:
            EventWriteError: If the final delivery fails.
        """
        ...


class EventTransportFactoryProtocol(Protocol):
    """Creates transports bound to an ASGI ``send`` callable.

    ``supports_flush`` is checked before streaming starts; a factory whose
    transports cannot flush incrementally causes the request to be rejected.
    """

    @property
    def supports_flush(self) -> bool:
        """Whether created transports can deliver data incrementally."""
        ...

    def create(self, send: Send) -> EventTransportProtocol:
        """Create a transport for one response.

        Args:
            send: ASGI send callable of the response.

        Returns:
            Transport writing to ``send``.
        """
        ...
