"""
Core chemical records and the rules that operate on them.

This module provides the Element, Ion and Compound records built from table rows,
electron configuration expansion and quantum number validation.
"""

from .exceptions import ChemicalError, ChemicalNotFoundError, ElectronConfigError
from .elements import Element
from .ions import Ion
from .compounds import Compound
from .electron_config import expand_electron_config, split_core, is_abbreviated
from .quantum import valid_quantum

__all__ = [
    'Element',
    'Ion',
    'Compound',
    'ChemicalError',
    'ChemicalNotFoundError',
    'ElectronConfigError',
    'expand_electron_config',
    'split_core',
    'is_abbreviated',
    'valid_quantum'
]
