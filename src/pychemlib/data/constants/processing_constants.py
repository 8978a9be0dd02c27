from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Sentinels and tolerances used while parsing reference table rows."""
    # Unknown-value sentinels
    NAN: Final[float] = float('nan')
    MIN_INT: Final[int] = -2147483648  # Smallest signed 32-bit integer
    # Quantum numbers
    SPIN_QUANTUM_NUMBERS: Final[tuple] = (0.5, -0.5)
    MAX_QUANTUM_NUMBERS: Final[int] = 4
    # Electron configuration notation
    CORE_PREFIX: Final[str] = '['
    CORE_SUFFIX: Final[str] = ']'
    # Ion charge markers
    POSITIVE_MARKER: Final[str] = '+'
    NEGATIVE_MARKER: Final[str] = '-'


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    CHEMICAL_NOT_FOUND: Final[str] = "{table} entry '{key}' could not be found in the data table"
    UNKNOWN_SYMBOL: Final[str] = "Element with symbol '{symbol}' not found"
    UNKNOWN_STRATEGY: Final[str] = "Unknown lookup strategy '{strategy}', expected one of: {choices}"
    CIRCULAR_CORE: Final[str] = "Circular electron configuration reference: {cycle_path}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    DELIMITER: Final[str] = ','


@dataclass(frozen=True)
class TableLayouts:
    """Column layouts of the reference tables, in file order."""
    ELEMENT_COLUMNS: Final[tuple] = (
        'atomic_number', 'name', 'symbol', 'atomic_mass', 'period', 'group', 'phase', 'type',
        'ionic_radius', 'atomic_radius', 'electronegativity', 'first_ionization', 'density',
        'melting_point', 'boiling_point', 'isotopes', 'specific_heat', 'electron_config',
        'valence_electrons',
    )
    ION_COLUMNS: Final[tuple] = ('symbol', 'name', 'charge')
    COMPOUND_COLUMNS: Final[tuple] = (
        'cid', 'name', 'molecular_weight', 'molecular_formula', 'polar_area', 'rotatable_bonds',
    )
    # Key column index per table
    ELEMENT_KEY_COLUMN: Final[int] = 0
    ION_KEY_COLUMN: Final[int] = 0
    COMPOUND_KEY_COLUMN: Final[int] = 3
