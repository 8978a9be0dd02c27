import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pychemlib.parsing.utils.utilities import parse_float, parse_int, parse_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Element:
    """
    A chemical element as recorded in the elements table.

    Unknown values use sentinels: NaN for floats, ProcessingConstants.MIN_INT for
    integers and None for text. Two elements are equal when their atomic numbers match.

    Units: atomic mass in u, radii in angstrom, first ionization in eV, density in g/mL,
    melting and boiling points in K, specific heat in J/(g*K).
    """
    atomic_number: int
    name: Optional[str] = field(compare=False)
    symbol: Optional[str] = field(compare=False)
    atomic_mass: float = field(compare=False)
    period: int = field(compare=False)
    group: int = field(compare=False)
    phase: Optional[str] = field(compare=False)
    type: Optional[str] = field(compare=False)
    ionic_radius: float = field(compare=False)
    atomic_radius: float = field(compare=False)
    electronegativity: float = field(compare=False)
    first_ionization: float = field(compare=False)
    density: float = field(compare=False)
    melting_point: float = field(compare=False)
    boiling_point: float = field(compare=False)
    isotopes: int = field(compare=False)
    specific_heat: float = field(compare=False)
    electron_config: Optional[str] = field(compare=False)
    valence_electrons: int = field(compare=False)
    # Repository the record was loaded from, used to resolve electron configuration cores
    repository: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_row(cls, row: List[str], repository: Any = None) -> "Element":
        """Build an element from the 19 fields of an elements table row."""
        element = cls(
            atomic_number=parse_int(row[0]),
            name=parse_text(row[1]),
            symbol=parse_text(row[2]),
            atomic_mass=parse_float(row[3]),
            period=parse_int(row[4]),
            group=parse_int(row[5]),
            phase=parse_text(row[6]),
            type=parse_text(row[7]),
            ionic_radius=parse_float(row[8]),
            atomic_radius=parse_float(row[9]),
            electronegativity=parse_float(row[10]),
            first_ionization=parse_float(row[11]),
            density=parse_float(row[12]),
            melting_point=parse_float(row[13]),
            boiling_point=parse_float(row[14]),
            isotopes=parse_int(row[15]),
            specific_heat=parse_float(row[16]),
            electron_config=parse_text(row[17]),
            valence_electrons=parse_int(row[18]),
            repository=repository,
        )
        logger.debug("Loaded element %s (Z=%d)", element.symbol, element.atomic_number)
        return element

    # --- Conversions ---
    def to_moles(self, grams: float) -> float:
        """Number of moles in the given mass in grams."""
        return grams / self.atomic_mass

    def to_grams(self, moles: float) -> float:
        """Mass in grams of the given number of moles."""
        return moles * self.atomic_mass

    def get_mass(self, volume: float) -> float:
        """Mass in grams of the given volume in mL."""
        return self.density * volume

    def get_volume(self, mass: float) -> float:
        """Volume in mL of the given mass in grams."""
        return mass / self.density

    # --- Electron configuration ---
    def get_electron_config(self) -> Optional[str]:
        """The abbreviated electron configuration as stored in the table."""
        return self.electron_config

    def get_full_electron_config(self, strict: bool = False) -> Optional[str]:
        """
        The fully expanded electron configuration, e.g. '1s2 2s2 2p6 3s2 3p1' for aluminum.

        Returns None (after logging the fault) when a referenced core cannot be resolved,
        unless strict is set, in which case ElectronConfigError is raised.
        """
        repository = self.repository
        if repository is None:
            from pychemlib.parsing.repository import get_default_repository
            repository = get_default_repository()
        return repository.expand_electron_config(self.electron_config, strict=strict)

    @property
    def full_electron_config(self) -> Optional[str]:
        """The expanded electron configuration, or None when it cannot be resolved."""
        return self.get_full_electron_config()

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"
