"""Unit tests for streaming container functions.

Tests cover:
- get_stream_config() built from settings
- get_event_transport_factory() returns the ASGI factory
- Singleton pattern for both
"""

from unittest.mock import patch

import pytest

from src.core.config import Settings
from src.core.container import get_event_transport_factory, get_stream_config
from src.infrastructure.sse import ASGIEventTransportFactory


@pytest.mark.unit
class TestGetStreamConfig:
    """Test get_stream_config()."""

    def test_built_from_settings(self):
        """Test stream config mirrors the stream settings."""
        settings = Settings(stream_interval_ms="250", stream_retry_ms=3000)

        with patch("src.core.config.get_settings", return_value=settings):
            config = get_stream_config()

        assert config.default_interval_ms == "250"
        assert config.retry_ms == 3000
        assert config.event_type == "number"

    def test_malformed_interval_kept_raw(self):
        """Test the configured interval is passed through unparsed."""
        settings = Settings(stream_interval_ms="fast")

        with patch("src.core.config.get_settings", return_value=settings):
            config = get_stream_config()

        assert config.default_interval_ms == "fast"

    def test_singleton(self):
        assert get_stream_config() is get_stream_config()


@pytest.mark.unit
class TestGetEventTransportFactory:
    """Test get_event_transport_factory()."""

    def test_returns_asgi_factory(self):
        factory = get_event_transport_factory()

        assert isinstance(factory, ASGIEventTransportFactory)
        assert factory.supports_flush

    def test_singleton(self):
        assert get_event_transport_factory() is get_event_transport_factory()
