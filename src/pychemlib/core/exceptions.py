"""Custom exceptions for pychemlib core functionality."""
import logging

from pychemlib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class ChemicalError(Exception):
    """Base exception for all chemical lookup errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ChemicalError raised: %s", message)


class ChemicalNotFoundError(ChemicalError, LookupError):
    """Exception raised when an element, ion or compound is not found in its data table."""

    def __init__(self, key, table: str):
        self.key = key
        self.table = table
        super().__init__(ErrorMessages.CHEMICAL_NOT_FOUND.format(table=table, key=key))


class ElectronConfigError(ChemicalError):
    """Exception raised when an abbreviated electron configuration cannot be expanded."""

    def __init__(self, message, config: str = None):
        self.config = config
        super().__init__(message)
        logger.error("ElectronConfigError raised: %s", message)
