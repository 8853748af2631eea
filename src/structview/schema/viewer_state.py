"""Display configuration consumed by the renderer and the view controls."""

from dataclasses import dataclass
from enum import Enum


class ViewMode(str, Enum):
    """Molecular representation drawn by the renderer."""

    CARTOON = "cartoon"
    SPACEFILL = "spacefill"
    LICORICE = "licorice"
    SURFACE = "surface"


class ColorScheme(str, Enum):
    """Coloring applied to the representation."""

    DEFAULT = "DEFAULT"
    CHAIN = "CHAIN"
    RESIDUE = "RESIDUE"
    ELEMENT = "ELEMENT"
    BFACTOR = "BFACTOR"
    SEQUENCE = "SEQUENCE"


@dataclass(frozen=True)
class ViewerState:
    """
    Snapshot of the viewer configuration.

    Instances are immutable; the coordinator replaces the whole snapshot on each update,
    so readers never observe a half-applied change.

    Attributes
    ----------
    view_mode : ViewMode
        Representation type.
    color_scheme : ColorScheme
        Coloring scheme.
    atom_size : float
        Atom radius scale, within :data:`structview.config.ATOM_SIZE_RANGE`.
    show_ligand : bool
        Whether ligands are drawn.
    show_water_ion : bool
        Whether water molecules and ions are drawn.
    """

    view_mode: ViewMode = ViewMode.CARTOON
    color_scheme: ColorScheme = ColorScheme.DEFAULT
    atom_size: float = 1.0
    show_ligand: bool = True
    show_water_ion: bool = True

    def to_dict(self) -> dict:
        """Convert the state to a plain dictionary with string enum values."""
        return {
            "view_mode": self.view_mode.value,
            "color_scheme": self.color_scheme.value,
            "atom_size": self.atom_size,
            "show_ligand": self.show_ligand,
            "show_water_ion": self.show_water_ion,
        }
