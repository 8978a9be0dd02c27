import logging
from typing import Optional, Union

import numpy as np

from pychemlib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


# --- Tolerant Field Parsers ---
def parse_float(text: Optional[str]) -> float:
    """
    Parse a table field as a float.
    Args:
        text: Raw field text, or None when the row had no such field
    Returns:
        The parsed value, or NaN when the field is missing or malformed
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        logger.debug("Unparsable float field %r, using NaN", text)
        return ProcessingConstants.NAN


def parse_int(text: Optional[str]) -> int:
    """
    Parse a table field as an integer.
    Args:
        text: Raw field text, or None when the row had no such field
    Returns:
        The parsed value, or ProcessingConstants.MIN_INT when the field is missing or malformed
    """
    try:
        return int(text)
    except (TypeError, ValueError):
        logger.debug("Unparsable integer field %r, using MIN_INT", text)
        return ProcessingConstants.MIN_INT


def parse_text(text: Optional[str]) -> Optional[str]:
    """Return the field text, or None for an empty (or missing) field."""
    if text is None or text == "":
        return None
    return text


def is_unknown(value: Union[float, int, str, None]) -> bool:
    """Check whether a parsed field holds one of the 'unknown' sentinels."""
    if value is None:
        return True
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return int(value) == ProcessingConstants.MIN_INT
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False
