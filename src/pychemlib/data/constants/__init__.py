"""Processing, file and table layout constants for PyChemLib."""

from .processing_constants import ProcessingConstants, ErrorMessages, FileConstants, TableLayouts

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
    "TableLayouts"
]
