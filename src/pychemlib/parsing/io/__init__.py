"""Reference table reading: lazy row scanning and whole-table loading."""

from .data_handler import lookup_row, iter_table_rows, split_row, load_table, validate_table_path

__all__ = [
    "lookup_row",
    "iter_table_rows",
    "split_row",
    "load_table",
    "validate_table_path"
]
