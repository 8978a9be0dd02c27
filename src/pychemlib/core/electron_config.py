import logging
from typing import Callable, List, Optional, Tuple

from pychemlib.core.exceptions import ChemicalError, ElectronConfigError
from pychemlib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def split_core(config: str) -> Tuple[Optional[str], List[str]]:
    """
    Split an electron configuration into its noble-gas core symbol and the remaining subshells.
    Args:
        config: Configuration text, e.g. '[Ne] 3s2 3p1'
    Returns:
        Tuple of (core symbol or None, remaining whitespace-delimited tokens)
    Examples:
        split_core('[Ne] 3s2 3p1') -> ('Ne', ['3s2', '3p1'])
        split_core('1s2 2s1') -> (None, ['1s2', '2s1'])
    """
    tokens = config.split()
    if not tokens:
        return None, []
    head = tokens[0]
    if (len(head) > 2 and head.startswith(ProcessingConstants.CORE_PREFIX)
            and head.endswith(ProcessingConstants.CORE_SUFFIX)):
        return head[1:-1], tokens[1:]
    return None, tokens


def is_abbreviated(config: Optional[str]) -> bool:
    """Check whether a configuration starts with a bracketed noble-gas core."""
    if not config:
        return False
    core, _ = split_core(config)
    return core is not None


def expand_electron_config(config: Optional[str], lookup_config: Callable[[str], Optional[str]],
                           strict: bool = False) -> Optional[str]:
    """
    Expand an abbreviated electron configuration into its full form.

    The bracketed core symbol is replaced by the configuration of that element, which is
    itself expanded until no core remains.
    Args:
        config: Configuration text, possibly abbreviated (e.g. '[Ne] 3s2 3p1')
        lookup_config: Callable returning the stored configuration of the element with the given symbol
        strict: Raise ElectronConfigError instead of returning None when expansion fails
    Returns:
        The fully expanded configuration, or None when config is empty or cannot be expanded
    Raises:
        ElectronConfigError: If strict is set and the core cannot be resolved
    """
    if not config:
        return None
    try:
        return _expand(config, lookup_config, [])
    except (ChemicalError, KeyError, OSError, ValueError) as e:
        if strict:
            if isinstance(e, ElectronConfigError):
                raise
            raise ElectronConfigError(f"Could not expand electron configuration '{config}': {e}",
                                      config=config) from e
        logger.error("Could not expand electron configuration '%s': %s", config, e, exc_info=True)
        return None


def _expand(config: str, lookup_config: Callable[[str], Optional[str]], visited: List[str]) -> str:
    core, rest = split_core(config)
    if core is None:
        return config
    if core in visited:
        cycle_path = " -> ".join(visited + [core])
        raise ElectronConfigError(ErrorMessages.CIRCULAR_CORE.format(cycle_path=cycle_path), config=config)
    core_config = lookup_config(core)
    if not core_config:
        raise ElectronConfigError(f"Element '{core}' has no electron configuration", config=config)
    logger.debug("Substituting core [%s] -> '%s'", core, core_config)
    return _expand(" ".join([core_config] + rest), lookup_config, visited + [core])
