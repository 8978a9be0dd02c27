import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pychemlib.parsing.utils.utilities import parse_float, parse_int, parse_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Compound:
    """A compound from the compounds table; equal to another compound when molecular formulas match."""
    cid: int = field(compare=False)  # PubChem compound identifier
    name: Optional[str] = field(compare=False)
    molecular_weight: float = field(compare=False)  # g/mol
    molecular_formula: str
    polar_area: float = field(compare=False)  # Topological polar surface area, angstrom^2
    rotatable_bonds: int = field(compare=False)

    @classmethod
    def from_row(cls, row: List[str]) -> "Compound":
        """Build a compound from the 6 fields of a compounds table row."""
        compound = cls(
            cid=parse_int(row[0]),
            name=parse_text(row[1]),
            molecular_weight=parse_float(row[2]),
            molecular_formula=row[3],
            polar_area=parse_float(row[4]),
            rotatable_bonds=parse_int(row[5]),
        )
        logger.debug("Loaded compound %s (CID %d)", compound.molecular_formula, compound.cid)
        return compound

    def __str__(self) -> str:
        return f"{self.name} ({self.molecular_formula})"
