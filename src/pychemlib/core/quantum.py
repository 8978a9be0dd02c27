import logging

import numpy as np

from pychemlib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def _is_integral(value: float) -> bool:
    return bool(np.isfinite(value)) and float(value).is_integer()


def valid_quantum(*quantum_numbers: float) -> bool:
    """
    Check whether a set of quantum numbers describes a valid electron state.
    Args:
        *quantum_numbers: Up to four numbers in the order n, l, ml, ms. Only the
            numbers given are checked.
    Returns:
        True if every supplied number satisfies its constraint:
            n  - non-negative integer
            l  - integer with 0 <= l <= n - 1
            ml - -l <= ml <= l
            ms - exactly +0.5 or -0.5
        False otherwise, including when more than four numbers are given.
    Raises:
        ValueError: If no quantum numbers are given
    Examples:
        valid_quantum(2, 1, 0, 0.5) -> True
        valid_quantum(2, 2, 0, 0.5) -> False
    """
    if not quantum_numbers:
        raise ValueError("At least the principal quantum number n is required")
    if len(quantum_numbers) > ProcessingConstants.MAX_QUANTUM_NUMBERS:
        logger.debug("Too many quantum numbers: %d", len(quantum_numbers))
        return False
    n = quantum_numbers[0]
    if n < 0 or not _is_integral(n):
        return False
    if len(quantum_numbers) == 1:
        return True
    l = quantum_numbers[1]
    if not 0 <= l <= n - 1 or not _is_integral(l):
        return False
    if len(quantum_numbers) == 2:
        return True
    ml = quantum_numbers[2]
    if not -l <= ml <= l:
        return False
    if len(quantum_numbers) == 3:
        return True
    ms = quantum_numbers[3]
    return ms in ProcessingConstants.SPIN_QUANTUM_NUMBERS
