"""
Reference data, constants, and element definitions.

This package provides access to processing constants, the element symbol map,
and the comma-separated reference tables (elements, ions, compounds) shipped
with PyChemLib.
"""
from pathlib import Path

from .constants.processing_constants import ProcessingConstants, ErrorMessages, FileConstants, TableLayouts
from .elements.element_data import (
    SYMBOL_TO_ATOMIC_NUMBER,
    ATOMIC_NUMBER_TO_SYMBOL,
    get_atomic_number,
    get_symbol
)

TABLES_DIR = Path(__file__).resolve().parent / "tables"
DEFAULT_CONFIG_PATH = TABLES_DIR / "default_tables.yaml"

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
    "TableLayouts",
    "SYMBOL_TO_ATOMIC_NUMBER",
    "ATOMIC_NUMBER_TO_SYMBOL",
    "get_atomic_number",
    "get_symbol",
    "TABLES_DIR",
    "DEFAULT_CONFIG_PATH"
]
