"""
Reading and configuring the reference tables.

The repository and the convenience API live in pychemlib.parsing.repository and
pychemlib.parsing.api; they are exported from the top-level package.
"""

from .config.table_yaml_parser import TableYAMLParser
from .utils.utilities import parse_float, parse_int, parse_text, is_unknown

__all__ = [
    'TableYAMLParser',
    'parse_float',
    'parse_int',
    'parse_text',
    'is_unknown'
]
