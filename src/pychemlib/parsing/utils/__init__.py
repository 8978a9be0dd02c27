"""Utility functions for parsing operations."""

from .utilities import (
    parse_float,
    parse_int,
    parse_text,
    is_unknown
)

__all__ = [
    "parse_float",
    "parse_int",
    "parse_text",
    "is_unknown"
]
