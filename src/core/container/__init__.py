"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_stream_config

The container is organized into modules by concern:
- infrastructure: Logging
- streaming: Stream configuration and transport factory

Factories double as FastAPI dependencies; tests replace them through
``app.dependency_overrides``.
"""

from src.core.container.infrastructure import get_logger
from src.core.container.streaming import (
    get_event_transport_factory,
    get_stream_config,
)

__all__ = [
    "get_event_transport_factory",
    "get_logger",
    "get_stream_config",
]
