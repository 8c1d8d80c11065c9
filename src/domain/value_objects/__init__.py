"""Domain value objects.

Immutable values describing a stream: the process-wide configuration and the
per-session parameters resolved from a request.
"""

from src.domain.value_objects.stream_config import StreamConfig
from src.domain.value_objects.stream_parameters import StartSource, StreamParameters

__all__ = [
    "StartSource",
    "StreamConfig",
    "StreamParameters",
]
