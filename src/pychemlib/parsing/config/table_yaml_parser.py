import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, constructor, scanner

from pychemlib.data.constants import ErrorMessages
from pychemlib.parsing.config.yaml_keys import RESOURCE_ROOT_KEY, LOOKUP_STRATEGY_KEY, HEADER_KEY, \
    TABLES_KEY, ELEMENTS_TABLE_KEY, IONS_TABLE_KEY, COMPOUNDS_TABLE_KEY, INDEX_STRATEGY, SCAN_STRATEGY

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class TableYAMLParser(YAMLFileParser):
    """Parser for reference table configuration files in YAML format."""

    VALID_TOP_LEVEL_KEYS = {RESOURCE_ROOT_KEY, LOOKUP_STRATEGY_KEY, HEADER_KEY, TABLES_KEY}
    VALID_TABLE_KEYS = {ELEMENTS_TABLE_KEY, IONS_TABLE_KEY, COMPOUNDS_TABLE_KEY}
    VALID_STRATEGIES = (INDEX_STRATEGY, SCAN_STRATEGY)
    DEFAULT_TABLE_FILES = {
        ELEMENTS_TABLE_KEY: "elements.csv",
        IONS_TABLE_KEY: "ions.csv",
        COMPOUNDS_TABLE_KEY: "compounds.csv",
    }

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing TableYAMLParser for: %s", yaml_path)
        self._validate_config()
        logger.info("TableYAMLParser initialized: root=%s, strategy=%s", self.resource_root, self.strategy)

    # --- Public API ---
    @property
    def resource_root(self) -> Path:
        """Directory holding the tables; relative roots resolve against the YAML file's directory."""
        root = Path(str(self.config.get(RESOURCE_ROOT_KEY, ".")))
        if not root.is_absolute():
            root = self.base_dir / root
        return root.resolve()

    @property
    def strategy(self) -> str:
        return self.config.get(LOOKUP_STRATEGY_KEY, INDEX_STRATEGY)

    @property
    def header(self) -> bool:
        return self.config.get(HEADER_KEY, True)

    @property
    def table_files(self) -> Dict[str, str]:
        """Table file names keyed by table name, with defaults for tables not configured."""
        files = dict(self.DEFAULT_TABLE_FILES)
        files.update(self.config.get(TABLES_KEY) or {})
        return files

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the top-level structure of the configuration."""
        if not isinstance(self.config, dict):
            raise ValueError(f"The YAML file {self.config_path} must define a mapping of configuration keys")
        self._check_unknown_keys(set(self.config.keys()), self.VALID_TOP_LEVEL_KEYS, "configuration keys")
        strategy = self.config.get(LOOKUP_STRATEGY_KEY, INDEX_STRATEGY)
        if strategy not in self.VALID_STRATEGIES:
            raise ValueError(ErrorMessages.UNKNOWN_STRATEGY.format(strategy=strategy,
                                                                   choices=", ".join(self.VALID_STRATEGIES)))
        if not isinstance(self.config.get(HEADER_KEY, True), bool):
            raise ValueError(f"'{HEADER_KEY}' must be true or false, got {self.config[HEADER_KEY]!r}")
        tables = self.config.get(TABLES_KEY) or {}
        if not isinstance(tables, dict):
            raise ValueError(f"'{TABLES_KEY}' must be a mapping of table name to file name")
        self._check_unknown_keys(set(tables.keys()), self.VALID_TABLE_KEYS, "table names")
        for table_name, file_name in tables.items():
            if not isinstance(file_name, str) or not file_name:
                raise ValueError(f"File name for table '{table_name}' must be a non-empty string")
        logger.debug("Configuration validation completed")

    @staticmethod
    def _check_unknown_keys(keys: set, valid_keys: set, description: str) -> None:
        unknown = keys - valid_keys
        if not unknown:
            return
        logger.error("Unknown %s found: %s", description, unknown)
        suggestions = {
            key: get_close_matches(str(key), valid_keys, n=1, cutoff=0.6)
            for key in sorted(unknown, key=str)
        }
        error_msg = f"Unknown {description} found: \n ->"
        for key, matches in suggestions.items():
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            error_msg += f" - '{key}'{suggestion}\n"
        raise ValueError(error_msg)
