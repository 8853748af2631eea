"""Residue-code tables used to classify water and ions."""

# exact, case-sensitive match
WATER_RESIDUES: frozenset[str] = frozenset({"HOH", "WAT"})

# monatomic ion residue codes are at most two characters (NA, CL, ZN, MG, ...)
ION_MAX_RESIDUE_LENGTH = 2


def is_water(residue: str) -> bool:
    """Return True if ``residue`` is a water residue code."""
    return residue in WATER_RESIDUES


def is_ion(residue: str) -> bool:
    """
    Return True if ``residue`` looks like a monatomic ion code.

    Heuristic: the code is at most two characters and contains no lowercase letter.
    It is a rough proxy, not a chemical classification; two-letter ligand or element
    codes are also counted. Callers apply it only to residues that are not water.
    """
    return len(residue) <= ION_MAX_RESIDUE_LENGTH and not any(char.islower() for char in residue)
