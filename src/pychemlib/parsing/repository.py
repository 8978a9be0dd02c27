import logging
import operator
from pathlib import Path
from typing import Dict, List, Optional, Union

from pychemlib.core.compounds import Compound
from pychemlib.core.electron_config import expand_electron_config
from pychemlib.core.elements import Element
from pychemlib.core.exceptions import ChemicalNotFoundError
from pychemlib.core.ions import Ion
from pychemlib.data import DEFAULT_CONFIG_PATH, TABLES_DIR
from pychemlib.data.constants import ErrorMessages, TableLayouts
from pychemlib.data.elements.element_data import get_atomic_number
from pychemlib.parsing.config.table_yaml_parser import TableYAMLParser
from pychemlib.parsing.config.yaml_keys import ELEMENTS_TABLE_KEY, IONS_TABLE_KEY, COMPOUNDS_TABLE_KEY, \
    INDEX_STRATEGY, SCAN_STRATEGY
from pychemlib.parsing.io.data_handler import load_table, lookup_row

logger = logging.getLogger(__name__)


class ChemicalRepository:
    """
    Read-only access to the element, ion and compound reference tables.

    Two lookup strategies share the same contract:
        - 'index': each table is loaded once, on first use, and indexed by its key column
        - 'scan': every lookup opens the table, scans it for the first matching row and closes it
    """

    TABLE_LAYOUTS = {
        ELEMENTS_TABLE_KEY: (TableLayouts.ELEMENT_KEY_COLUMN, len(TableLayouts.ELEMENT_COLUMNS)),
        IONS_TABLE_KEY: (TableLayouts.ION_KEY_COLUMN, len(TableLayouts.ION_COLUMNS)),
        COMPOUNDS_TABLE_KEY: (TableLayouts.COMPOUND_KEY_COLUMN, len(TableLayouts.COMPOUND_COLUMNS)),
    }
    STRATEGIES = (INDEX_STRATEGY, SCAN_STRATEGY)

    def __init__(self, resource_root: Optional[Union[str, Path]] = None, strategy: str = INDEX_STRATEGY,
                 table_files: Optional[Dict[str, str]] = None, header: bool = True) -> None:
        if strategy not in self.STRATEGIES:
            raise ValueError(ErrorMessages.UNKNOWN_STRATEGY.format(strategy=strategy,
                                                                   choices=", ".join(self.STRATEGIES)))
        self.resource_root = Path(resource_root) if resource_root is not None else TABLES_DIR
        self.strategy = strategy
        self.header = header
        self.table_files = dict(TableYAMLParser.DEFAULT_TABLE_FILES)
        if table_files:
            unknown = set(table_files) - set(self.TABLE_LAYOUTS)
            if unknown:
                raise ValueError(f"Unknown table names: {sorted(unknown)}")
            self.table_files.update(table_files)
        self._indexes: Dict[str, Dict[str, List[str]]] = {}
        logger.info("ChemicalRepository created: root=%s, strategy=%s", self.resource_root, self.strategy)

    @classmethod
    def from_config(cls, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> "ChemicalRepository":
        """Create a repository from a YAML table configuration file."""
        parser = TableYAMLParser(config_path)
        return cls(resource_root=parser.resource_root, strategy=parser.strategy,
                   table_files=parser.table_files, header=parser.header)

    # --- Public API ---
    def get_element(self, atomic_number: int) -> Element:
        """
        Get an element by atomic number.
        Raises:
            ChemicalNotFoundError: If the elements table has no such atomic number
        """
        if isinstance(atomic_number, bool):
            raise ChemicalNotFoundError(atomic_number, ELEMENTS_TABLE_KEY)
        try:
            key = str(operator.index(atomic_number))
        except TypeError as e:
            raise ChemicalNotFoundError(atomic_number, ELEMENTS_TABLE_KEY) from e
        row = self._lookup(ELEMENTS_TABLE_KEY, key)
        return Element.from_row(row, repository=self)

    def get_element_by_symbol(self, symbol: str) -> Element:
        """
        Get an element by its (case-sensitive) symbol, e.g. 'Fe'.
        Raises:
            ChemicalNotFoundError: If the symbol is unknown
        """
        try:
            atomic_number = get_atomic_number(symbol)
        except KeyError as e:
            raise ChemicalNotFoundError(symbol, ELEMENTS_TABLE_KEY) from e
        return self.get_element(atomic_number)

    def get_ion(self, symbol: str) -> Ion:
        """
        Get an ion by its exact symbol, e.g. 'CO3--'.
        Raises:
            ChemicalNotFoundError: If the ions table has no such symbol
        """
        return Ion.from_row(self._lookup(IONS_TABLE_KEY, symbol))

    def get_compound(self, molecular_formula: str) -> Compound:
        """
        Get a compound by its exact molecular formula, e.g. 'CO2'.
        Raises:
            ChemicalNotFoundError: If the compounds table has no such formula
        """
        return Compound.from_row(self._lookup(COMPOUNDS_TABLE_KEY, molecular_formula))

    def expand_electron_config(self, config: Optional[str], strict: bool = False) -> Optional[str]:
        """Expand an abbreviated electron configuration using this repository's elements table."""
        return expand_electron_config(config, self._core_config, strict=strict)

    def table_path(self, table_name: str) -> Path:
        """Path of the given table under the resource root."""
        if table_name not in self.table_files:
            raise ValueError(f"Unknown table name '{table_name}'")
        return self.resource_root / self.table_files[table_name]

    def clear_cache(self) -> None:
        """Drop every loaded index so that the next lookup reloads its table."""
        count = len(self._indexes)
        self._indexes.clear()
        logger.info("Cleared %d table indexes", count)

    # --- Internal Methods ---
    def _core_config(self, symbol: str) -> Optional[str]:
        return self.get_element(get_atomic_number(symbol)).electron_config

    def _lookup(self, table_name: str, key: str) -> List[str]:
        key_column, arity = self.TABLE_LAYOUTS[table_name]
        if self.strategy == SCAN_STRATEGY:
            return lookup_row(self.table_path(table_name), key_column, key, arity,
                              header=self.header, table_name=table_name)
        row = self._index(table_name).get(key)
        if row is None:
            raise ChemicalNotFoundError(key, table_name)
        return list(row)

    def _index(self, table_name: str) -> Dict[str, List[str]]:
        if table_name not in self._indexes:
            key_column, arity = self.TABLE_LAYOUTS[table_name]
            df = load_table(self.table_path(table_name), arity, header=self.header)
            index: Dict[str, List[str]] = {}
            for row in df.itertuples(index=False, name=None):
                key = row[key_column]
                if key in index:
                    logger.warning("Duplicate key '%s' in %s table, keeping the first row", key, table_name)
                    continue
                index[key] = list(row)
            self._indexes[table_name] = index
            logger.info("Indexed %d %s by column %d", len(index), table_name, key_column)
        return self._indexes[table_name]


_default_repository: Optional[ChemicalRepository] = None


def get_default_repository() -> ChemicalRepository:
    """Get the shared repository, created from the packaged table configuration on first use."""
    global _default_repository
    if _default_repository is None:
        _default_repository = ChemicalRepository.from_config(DEFAULT_CONFIG_PATH)
    return _default_repository


def set_default_repository(repository: Optional[ChemicalRepository]) -> None:
    """Replace the shared repository; None resets it to the packaged tables."""
    global _default_repository
    _default_repository = repository
    logger.info("Default repository set to %s", repository.resource_root if repository else "packaged tables")
