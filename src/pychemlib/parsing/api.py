import logging
from pathlib import Path
from typing import Optional, Union

from pychemlib.core.compounds import Compound
from pychemlib.core.elements import Element
from pychemlib.core.ions import Ion
from pychemlib.core.quantum import valid_quantum
from pychemlib.parsing.config.table_yaml_parser import TableYAMLParser
from pychemlib.parsing.repository import ChemicalRepository, get_default_repository, set_default_repository

logger = logging.getLogger(__name__)


def get_element(atomic_number: int) -> Element:
    """
    Look up an element by atomic number in the default tables.
    Args:
        atomic_number: Atomic number, e.g. 13 for aluminum
    Returns:
        The element record
    Raises:
        ChemicalNotFoundError: If no element has the given atomic number
    Examples:
        al = get_element(13)
        al.get_full_electron_config()  # '1s2 2s2 2p6 3s2 3p1'
    """
    return get_default_repository().get_element(atomic_number)


def get_element_by_symbol(symbol: str) -> Element:
    """Look up an element by its symbol (e.g. 'Fe') in the default tables."""
    return get_default_repository().get_element_by_symbol(symbol)


def get_ion(symbol: str) -> Ion:
    """
    Look up an ion by its exact symbol in the default tables.

    The returned ion is a fresh object; changing its charge does not affect later lookups.
    Raises:
        ChemicalNotFoundError: If no ion has the given symbol
    """
    return get_default_repository().get_ion(symbol)


def get_compound(molecular_formula: str) -> Compound:
    """Look up a compound by its exact molecular formula (e.g. 'CO2') in the default tables."""
    return get_default_repository().get_compound(molecular_formula)


def expand_electron_config(config: Optional[str], strict: bool = False) -> Optional[str]:
    """Expand an abbreviated electron configuration (e.g. '[Ne] 3s2 3p1') using the default tables."""
    return get_default_repository().expand_electron_config(config, strict=strict)


def load_repository(config_path: Union[str, Path], make_default: bool = False) -> ChemicalRepository:
    """
    Create a repository from a YAML table configuration file.
    Args:
        config_path: Path to the YAML configuration
        make_default: Whether the module-level lookup functions should use the new repository
    Returns:
        The configured repository
    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ValueError: If the configuration is invalid
    """
    logger.info("Loading repository from: %s (make_default=%s)", config_path, make_default)
    try:
        repository = ChemicalRepository.from_config(config_path)
    except Exception as e:
        logger.error("Failed to load repository from %s: %s", config_path, e, exc_info=True)
        raise
    if make_default:
        set_default_repository(repository)
    return repository


def validate_table_config(config_path: Union[str, Path]) -> bool:
    """
    Validate a YAML table configuration without reading the tables.
    Returns:
        True if the configuration is valid
    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ValueError: If the configuration is invalid
    """
    logger.info("Validating table configuration: %s", config_path)
    try:
        _ = TableYAMLParser(config_path)
        logger.info("Table configuration is valid: %s", config_path)
        return True
    except (FileNotFoundError, ValueError):
        logger.error("Table configuration validation failed for: %s", config_path)
        raise
    except Exception as e:
        logger.error("Unexpected error validating %s: %s", config_path, e, exc_info=True)
        raise ValueError(f"Unexpected error validating table configuration: {str(e)}") from e


__all__ = [
    "get_element",
    "get_element_by_symbol",
    "get_ion",
    "get_compound",
    "expand_electron_config",
    "load_repository",
    "validate_table_config",
    "valid_quantum"
]
