"""Chemical element symbol definitions."""

from .element_data import (
    SYMBOL_TO_ATOMIC_NUMBER, ATOMIC_NUMBER_TO_SYMBOL,
    get_atomic_number, get_symbol
)

__all__ = [
    "SYMBOL_TO_ATOMIC_NUMBER", "ATOMIC_NUMBER_TO_SYMBOL",
    "get_atomic_number", "get_symbol"
]
