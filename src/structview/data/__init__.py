"""Static residue tables."""

from structview.data.residues import ION_MAX_RESIDUE_LENGTH, WATER_RESIDUES, is_ion, is_water

__all__ = ["ION_MAX_RESIDUE_LENGTH", "WATER_RESIDUES", "is_ion", "is_water"]
