"""Lenient parsing of client-supplied integers.

Stream parameters arrive as raw query strings and headers. A malformed value
is never an error: parsers return None and the caller substitutes a default.

Accepted syntax is an optional sign followed by ASCII decimal digits, nothing
else (no whitespace, underscores, or non-ASCII digits). Values outside the
signed 64-bit range, or spelled with more digits than any int64 needs, are
treated as malformed.
"""

import re

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(_INT64_MAX))


def parse_int(raw: str | None) -> int | None:
    """Parse a strict decimal integer.

    Args:
        raw: Raw string value (may be None).

    Returns:
        Parsed integer, or None when absent or malformed.

    Example:
        >>> parse_int("42")
        42
        >>> parse_int("4 2") is None
        True
    """
    if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
        return None
    if len(raw.lstrip("+-")) > _INT64_MAX_DIGITS:
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_non_negative_int(raw: str | None) -> int | None:
    """Parse an integer that must be >= 0.

    Args:
        raw: Raw string value (may be None).

    Returns:
        Parsed integer, or None when absent, malformed, or negative.
    """
    value = parse_int(raw)
    if value is None or value < 0:
        return None
    return value


def parse_positive_int(raw: str | None) -> int | None:
    """Parse an integer that must be > 0.

    Args:
        raw: Raw string value (may be None).

    Returns:
        Parsed integer, or None when absent, malformed, or not positive.
    """
    value = parse_int(raw)
    if value is None or value <= 0:
        return None
    return value
