"""Constants used for YAML parsing of table configuration files."""

# Resource location keys
RESOURCE_ROOT_KEY = "resource_root"
LOOKUP_STRATEGY_KEY = "lookup_strategy"
HEADER_KEY = "header"

# Table file keys
TABLES_KEY = "tables"
ELEMENTS_TABLE_KEY = "elements"
IONS_TABLE_KEY = "ions"
COMPOUNDS_TABLE_KEY = "compounds"

# Lookup strategies
INDEX_STRATEGY = "index"
SCAN_STRATEGY = "scan"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
