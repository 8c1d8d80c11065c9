"""Pytest configuration.

This configuration ensures:
1. Async tests are marked for pytest-asyncio automatically
2. Custom markers are registered
3. Cached container singletons are cleared between tests
"""

import inspect
from unittest.mock import MagicMock

import pytest

from src.core.container import get_event_transport_factory, get_stream_config
from src.domain.value_objects import StreamConfig

pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP endpoint tests through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def clear_stream_singletons():
    """Reset cached stream collaborators so settings patches take effect."""
    get_stream_config.cache_clear()
    get_event_transport_factory.cache_clear()
    yield
    get_stream_config.cache_clear()
    get_event_transport_factory.cache_clear()


@pytest.fixture
def stream_config() -> StreamConfig:
    """Stream configuration with the built-in defaults."""
    return StreamConfig(default_interval_ms="100", retry_ms=1000, event_type="number")


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same mock for easy assertions."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger
