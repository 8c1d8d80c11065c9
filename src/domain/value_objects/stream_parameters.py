"""Per-session stream parameters.

Resolved once when a connection opens, from three client inputs and the
process-wide StreamConfig.

Start sequence priority:
    1. ``start`` query override (authoritative when present, even over 2)
    2. ``Last-Event-ID`` resume checkpoint (next value = checkpoint + 1)
    3. Zero

Interval and limit are resolved independently. Malformed or out-of-range
values are normalized to defaults, never rejected.

Example:
    >>> config = StreamConfig(default_interval_ms="100")
    >>> params = StreamParameters.resolve(config, last_event_id="41")
    >>> params.start, params.start_source
    (42, <StartSource.RESUME: 'resume'>)
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum

from src.core.constants import (
    STREAM_INTERVAL_MS_DEFAULT,
    STREAM_INTERVAL_MS_MAX,
    STREAM_UNBOUNDED,
)
from src.domain.validators import parse_non_negative_int, parse_positive_int
from src.domain.value_objects.stream_config import StreamConfig


class StartSource(StrEnum):
    """Which input determined the starting sequence value."""

    OVERRIDE = "override"
    RESUME = "resume"
    DEFAULT = "default"


@dataclass(frozen=True, kw_only=True, slots=True)
class StreamParameters:
    """Resolved parameters for one streaming session.

    Attributes:
        start: First sequence value to emit.
        start_source: Input that produced ``start``.
        interval_ms: Milliseconds between emissions (positive, and short
            enough to be represented as a timedelta).
        limit: Maximum events to emit; 0 means unbounded.
    """

    start: int
    start_source: StartSource
    interval_ms: int
    limit: int = STREAM_UNBOUNDED

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if not 0 < self.interval_ms <= STREAM_INTERVAL_MS_MAX:
            raise ValueError(f"interval_ms must be in 1..{STREAM_INTERVAL_MS_MAX}")
        if self.limit < 0:
            raise ValueError("limit must be >= 0")

    @property
    def interval(self) -> timedelta:
        """Emission interval as a duration."""
        return timedelta(milliseconds=self.interval_ms)

    @property
    def is_bounded(self) -> bool:
        """True when a finite emission cap is active."""
        return self.limit != STREAM_UNBOUNDED

    @classmethod
    def resolve(
        cls,
        config: StreamConfig,
        *,
        interval_ms: str | None = None,
        start: str | None = None,
        limit: str | None = None,
        last_event_id: str | None = None,
    ) -> "StreamParameters":
        """Resolve session parameters from raw request values.

        Args:
            config: Process-wide stream configuration.
            interval_ms: Raw ``intervalMs`` query value.
            start: Raw ``start`` query value.
            limit: Raw ``limit`` query value.
            last_event_id: Raw ``Last-Event-ID`` header value.

        Returns:
            StreamParameters with every field normalized.
        """
        resolved_interval = (
            _parse_interval_ms(interval_ms)
            or _parse_interval_ms(config.default_interval_ms)
            or STREAM_INTERVAL_MS_DEFAULT
        )

        override = parse_non_negative_int(start)
        checkpoint = parse_non_negative_int(last_event_id)
        if override is not None:
            first, source = override, StartSource.OVERRIDE
        elif checkpoint is not None:
            first, source = checkpoint + 1, StartSource.RESUME
        else:
            first, source = 0, StartSource.DEFAULT

        cap = parse_non_negative_int(limit)

        return cls(
            start=first,
            start_source=source,
            interval_ms=resolved_interval,
            limit=STREAM_UNBOUNDED if cap is None else cap,
        )


def _parse_interval_ms(raw: str | None) -> int | None:
    value = parse_positive_int(raw)
    if value is None or value > STREAM_INTERVAL_MS_MAX:
        return None
    return value
