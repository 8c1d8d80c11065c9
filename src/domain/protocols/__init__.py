"""Domain protocols (ports) package.

This package contains protocol definitions that the domain and application
layers need. Infrastructure adapters implement these protocols without
inheritance (PEP 544 structural typing).

Usage:
    from src.domain.protocols import EventEncoderProtocol, LoggerProtocol
"""

from src.domain.protocols.event_encoder_protocol import EventEncoderProtocol
from src.domain.protocols.event_transport_protocol import (
    EventTransportFactoryProtocol,
    EventTransportProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventEncoderProtocol",
    "EventTransportFactoryProtocol",
    "EventTransportProtocol",
    "LoggerProtocol",
]
