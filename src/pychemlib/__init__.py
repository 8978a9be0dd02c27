"""
PyChemLib - A Python library for chemical reference data lookup.

This library provides read-only access to tables of chemical elements, ions and
compounds, together with a few chemistry rules that operate on the records.

Key Features:
- Element lookup by atomic number or symbol, ion lookup by symbol, compound lookup by formula
- Tolerant field parsing with NaN / MIN_INT / None sentinels for unknown values
- Expansion of abbreviated electron configurations (e.g. '[Ne] 3s2 3p1')
- Ion charge mutation and quantum number validation
- YAML-configured table locations with indexed or scanning lookup strategies

Main Components:
- Core: Element, Ion and Compound records and the chemistry rules
- Parsing: Table reading, YAML configuration and the lookup repository
- Data: Packaged reference tables, element symbols and processing constants
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pychemlib")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core records and rules
from .core.elements import Element
from .core.ions import Ion
from .core.compounds import Compound
from .core.exceptions import ChemicalError, ChemicalNotFoundError, ElectronConfigError
from .core.quantum import valid_quantum

# Repository
from .parsing.repository import ChemicalRepository, get_default_repository, set_default_repository

# Main API functions
from .parsing.api import (
    get_element,
    get_element_by_symbol,
    get_ion,
    get_compound,
    expand_electron_config,
    load_repository,
    validate_table_config
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Element',
    'Ion',
    'Compound',

    # Exceptions
    'ChemicalError',
    'ChemicalNotFoundError',
    'ElectronConfigError',

    # Repository
    'ChemicalRepository',
    'get_default_repository',
    'set_default_repository',

    # Main API
    'get_element',
    'get_element_by_symbol',
    'get_ion',
    'get_compound',
    'expand_electron_config',
    'load_repository',
    'validate_table_config',
    'valid_quantum'
]

# Package metadata
__description__ = "Chemical reference data lookup library"
