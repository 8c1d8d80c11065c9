"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires middleware,
exception handlers and routers, and owns the process-wide shutdown signal
that cancels open event streams.
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.constants import LAST_EVENT_ID_HEADER
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers import stream_router, system_router
from src.presentation.routers.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create the shutdown event every stream watches
    - Shutdown: Set it so any stream still open stops writing

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    app.state.shutdown_event = asyncio.Event()
    logger.info(
        "Application started",
        version=settings.app_version,
        default_interval_ms=settings.stream_interval_ms,
    )

    yield

    app.state.shutdown_event.set()
    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Per-connection Server-Sent Events number stream",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS (preflight answers GET/OPTIONS and allows the resume header)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", LAST_EVENT_ID_HEADER],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(stream_router)
