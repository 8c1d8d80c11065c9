"""Validators package exports.

Exports:
    - Lenient integer parsers for client-supplied stream parameters
"""

from src.domain.validators.functions import (
    parse_int,
    parse_non_negative_int,
    parse_positive_int,
)

__all__ = [
    "parse_int",
    "parse_non_negative_int",
    "parse_positive_int",
]
