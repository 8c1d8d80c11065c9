"""Process bootstrap.

Runs the application under uvicorn with stream-friendly settings:
- open streams are never timed out by this layer
- SIGINT/SIGTERM first set the app's shutdown event (cancelling every open
  stream), then let uvicorn drain connections within the grace period

Usage:
    python -m src.server
    tickstream            # console script
"""

import asyncio
from types import FrameType

import uvicorn

from src.core.config import settings
from src.core.container import get_logger
from src.main import app


class StreamingServer(uvicorn.Server):
    """uvicorn server that cancels open streams before draining.

    uvicorn waits for in-flight requests before running lifespan shutdown,
    and an event stream never finishes on its own, so the shutdown event is
    set here, at signal time.
    """

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        shutdown_event: asyncio.Event | None = getattr(
            app.state, "shutdown_event", None
        )
        if shutdown_event is not None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                shutdown_event.set()
            else:
                loop.call_soon_threadsafe(shutdown_event.set)
        super().handle_exit(sig, frame)


def run() -> None:
    """Run the service until interrupted."""
    logger = get_logger()
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=max(1, round(settings.shutdown_grace_seconds)),
    )
    logger.info("Starting server", host=settings.host, port=settings.port)
    StreamingServer(config).run()
    logger.info("Server stopped")


if __name__ == "__main__":
    run()
