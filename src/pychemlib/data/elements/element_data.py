from pychemlib.data.constants.processing_constants import ErrorMessages

# Maps chemical symbols to atomic numbers so that bracketed noble-gas cores in
# electron configurations (like '[Ne]') and symbol lookups resolve to a row of
# the elements table.
SYMBOL_TO_ATOMIC_NUMBER = {
    'H': 1, 'He': 2, 'Li': 3, 'Be': 4, 'B': 5, 'C': 6, 'N': 7, 'O': 8, 'F': 9, 'Ne': 10,
    'Na': 11, 'Mg': 12, 'Al': 13, 'Si': 14, 'P': 15, 'S': 16, 'Cl': 17, 'Ar': 18, 'K': 19, 'Ca': 20,
    'Sc': 21, 'Ti': 22, 'V': 23, 'Cr': 24, 'Mn': 25, 'Fe': 26, 'Co': 27, 'Ni': 28, 'Cu': 29, 'Zn': 30,
    'Ga': 31, 'Ge': 32, 'As': 33, 'Se': 34, 'Br': 35, 'Kr': 36, 'Rb': 37, 'Sr': 38, 'Y': 39, 'Zr': 40,
    'Nb': 41, 'Mo': 42, 'Tc': 43, 'Ru': 44, 'Rh': 45, 'Pd': 46, 'Ag': 47, 'Cd': 48, 'In': 49, 'Sn': 50,
    'Sb': 51, 'Te': 52, 'I': 53, 'Xe': 54, 'Cs': 55, 'Ba': 56, 'La': 57, 'Ce': 58, 'Pr': 59, 'Nd': 60,
    'Pm': 61, 'Sm': 62, 'Eu': 63, 'Gd': 64, 'Tb': 65, 'Dy': 66, 'Ho': 67, 'Er': 68, 'Tm': 69, 'Yb': 70,
    'Lu': 71, 'Hf': 72, 'Ta': 73, 'W': 74, 'Re': 75, 'Os': 76, 'Ir': 77, 'Pt': 78, 'Au': 79, 'Hg': 80,
    'Tl': 81, 'Pb': 82, 'Bi': 83, 'Po': 84, 'At': 85, 'Rn': 86, 'Fr': 87, 'Ra': 88, 'Ac': 89, 'Th': 90,
    'Pa': 91, 'U': 92, 'Np': 93, 'Pu': 94, 'Am': 95, 'Cm': 96, 'Bk': 97, 'Cf': 98, 'Es': 99, 'Fm': 100,
    'Md': 101, 'No': 102, 'Lr': 103, 'Rf': 104, 'Db': 105, 'Sg': 106, 'Bh': 107, 'Hs': 108, 'Mt': 109,
    'Ds': 110, 'Rg': 111, 'Cn': 112, 'Nh': 113, 'Fl': 114, 'Mc': 115, 'Lv': 116, 'Ts': 117, 'Og': 118,
}

ATOMIC_NUMBER_TO_SYMBOL = {number: symbol for symbol, number in SYMBOL_TO_ATOMIC_NUMBER.items()}

# Noble gas cores usable in abbreviated electron configurations

def get_atomic_number(symbol: str) -> int:
    """Get atomic number by symbol with error handling."""
    if symbol not in SYMBOL_TO_ATOMIC_NUMBER:
        raise KeyError(ErrorMessages.UNKNOWN_SYMBOL.format(symbol=symbol))
    return SYMBOL_TO_ATOMIC_NUMBER[symbol]


def get_symbol(atomic_number: int) -> str:
    """Get symbol by atomic number with error handling."""
    if atomic_number not in ATOMIC_NUMBER_TO_SYMBOL:
        raise KeyError(f"Element with atomic number {atomic_number} not found")
    return ATOMIC_NUMBER_TO_SYMBOL[atomic_number]
