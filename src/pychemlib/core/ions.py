import logging
from typing import List

from pychemlib.data.constants import ProcessingConstants
from pychemlib.parsing.utils.utilities import parse_int, parse_text

logger = logging.getLogger(__name__)


class Ion:
    """
    An ion with a mutable charge.

    The symbol carries the charge as trailing '+' or '-' markers (e.g. 'SO4--').
    Ions compare equal when their symbols match case-insensitively. Since symbol
    and charge can change, ions are not hashable.
    """

    __hash__ = None

    def __init__(self, symbol: str, name: str, charge: int) -> None:
        self.symbol = symbol
        self._name = name
        self.charge = charge

    @classmethod
    def from_row(cls, row: List[str]) -> "Ion":
        """Build an ion from the 3 fields of an ions table row."""
        ion = cls(symbol=row[0], name=parse_text(row[1]), charge=parse_int(row[2]))
        logger.debug("Loaded ion %s (charge %d)", ion.symbol, ion.charge)
        return ion

    @property
    def name(self) -> str:
        return self._name

    def charge_plus(self) -> None:
        """Increase the charge by one; a '-' marker is cancelled, otherwise a '+' is appended."""
        self.charge += 1
        if ProcessingConstants.NEGATIVE_MARKER in self.symbol:
            self.symbol = self.symbol.replace(ProcessingConstants.NEGATIVE_MARKER, "", 1)
        else:
            self.symbol += ProcessingConstants.POSITIVE_MARKER
        logger.debug("Charge increased: %s (charge %d)", self.symbol, self.charge)

    def charge_minus(self) -> None:
        """Decrease the charge by one; a '+' marker is cancelled, otherwise a '-' is appended."""
        self.charge -= 1
        if ProcessingConstants.POSITIVE_MARKER in self.symbol:
            self.symbol = self.symbol.replace(ProcessingConstants.POSITIVE_MARKER, "", 1)
        else:
            self.symbol += ProcessingConstants.NEGATIVE_MARKER
        logger.debug("Charge decreased: %s (charge %d)", self.symbol, self.charge)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ion):
            return NotImplemented
        return self.symbol.lower() == other.symbol.lower()

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"

    def __repr__(self) -> str:
        return f"Ion(symbol={self.symbol!r}, name={self.name!r}, charge={self.charge!r})"
