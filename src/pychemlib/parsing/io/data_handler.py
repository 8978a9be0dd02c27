import csv
import logging
import warnings
from contextlib import closing
from pathlib import Path
from typing import Iterator, List, Optional, Union

import pandas as pd

from pychemlib.core.exceptions import ChemicalNotFoundError
from pychemlib.data.constants import FileConstants

logger = logging.getLogger(__name__)


def lookup_row(table_path: Union[str, Path], key_column: int, key_value: str, arity: int,
               header: bool = True, table_name: Optional[str] = None) -> List[str]:
    """
    Scan a table for the first row whose key column equals key_value.
    Args:
        table_path: Path to the comma-separated table
        key_column: Index of the column compared against key_value
        key_value: Exact text the key column must hold
        arity: Number of fields every row is normalized to
        header: Indicates if the file starts with a header row
        table_name: Name reported when nothing matches (defaults to the file stem)
    Returns:
        The matching row as a list of arity strings
    Raises:
        ChemicalNotFoundError: If no row matches
        FileNotFoundError: If the table doesn't exist
        PermissionError: If the table cannot be read due to permissions
        ValueError: If the path is not a supported table file
    """
    if not 0 <= key_column < arity:
        raise ValueError(f"Key column index {key_column} out of bounds (table has {arity} columns)")
    table_path = Path(table_path)
    logger.debug("Scanning %s for %s in column %d", table_path.name, key_value, key_column)
    with closing(iter_table_rows(table_path, arity, header)) as rows:
        for row in rows:
            if row[key_column] == key_value:
                return row
    raise ChemicalNotFoundError(key_value, table_name or table_path.stem)


def iter_table_rows(table_path: Union[str, Path], arity: int, header: bool = True) -> Iterator[List[str]]:
    """
    Lazily yield the rows of a comma-separated table.

    Fields are split on ',' with no quoting or escaping. Each row is normalized
    to exactly arity fields: short rows are padded with empty strings and extra
    fields are dropped. Blank lines are skipped. The file is closed when the
    generator is exhausted or closed.
    """
    table_path = validate_table_path(table_path)
    try:
        with open(table_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
            for line_number, line in enumerate(f, start=1):
                if header and line_number == 1:
                    continue
                line = line.rstrip('\r\n')
                if not line.strip():
                    continue
                yield split_row(line, arity, table_path, line_number)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading table {table_path}: {str(e)}") from e


def split_row(line: str, arity: int, table_path: Union[str, Path] = "<table>", line_number: int = 0) -> List[str]:
    """Split one table line on the delimiter into exactly arity fields."""
    fields = line.split(FileConstants.DELIMITER)
    if len(fields) < arity:
        logger.debug("%s:%d has %d fields, padding to %d", table_path, line_number, len(fields), arity)
        fields.extend([""] * (arity - len(fields)))
    elif len(fields) > arity:
        logger.warning("%s:%d has %d fields, ignoring all beyond %d",
                       table_path, line_number, len(fields), arity)
        fields = fields[:arity]
    return fields


def load_table(table_path: Union[str, Path], arity: int, header: bool = True) -> pd.DataFrame:
    """
    Read a whole comma-separated table into a DataFrame of strings.
    Args:
        table_path: Path to the comma-separated table
        arity: Number of columns; columns are labelled 0..arity-1
        header: Indicates if the file starts with a header row
    Returns:
        DataFrame with one row per table line and missing fields as empty strings
    Raises:
        FileNotFoundError: If the table doesn't exist
        PermissionError: If the table cannot be read due to permissions
        ValueError: If the path is not a supported table file or cannot be parsed
    """
    table_path = validate_table_path(table_path)
    columns = list(range(arity))
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            df = pd.read_csv(
                table_path,
                sep=FileConstants.DELIMITER,
                header=None,
                names=columns,
                index_col=False,
                skiprows=1 if header else 0,
                dtype=object,
                keep_default_na=False,
                na_filter=False,
                quoting=csv.QUOTE_NONE,
                skip_blank_lines=True,
                encoding=FileConstants.DEFAULT_ENCODING,
                engine='python',
            )
    except pd.errors.EmptyDataError:
        logger.warning("Table %s has no rows", table_path)
        return pd.DataFrame(columns=columns, dtype=object)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading table {table_path}: {str(e)}") from e
    except Exception as e:
        raise ValueError(f"Error reading table {table_path}: {str(e)}") from e
    for warning in caught:
        if issubclass(warning.category, pd.errors.ParserWarning):
            logger.warning("%s: %s", table_path.name, warning.message)
        else:
            warnings.warn(warning.message, warning.category, stacklevel=2)
    df = df.fillna("")
    logger.info("Loaded %d rows from %s", len(df), table_path.name)
    return df


def validate_table_path(table_path: Union[str, Path]) -> Path:
    """Check that a table file exists, is readable and has a supported extension and size."""
    table_path = Path(table_path)
    if not table_path.exists():
        raise FileNotFoundError(f"Table not found: {table_path}")
    if not table_path.is_file():
        raise ValueError(f"Path is not a file: {table_path}")
    file_extension = table_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported table type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    file_size_mb = table_path.stat().st_size / (1024 * 1024)
    if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"Table size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    return table_path
