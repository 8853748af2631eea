"""
Immutable atom and molecule records produced by the structure parsers.

A Molecule is created once per successfully parsed input and is never mutated in place;
every statistic in :mod:`structview.analysis.statistics` is a pure function of its atoms.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Atom:
    """
    One parsed atomic record.

    Attributes
    ----------
    element : str
        Element symbol as written in the source file (e.g. "C", "FE").
    residue : str
        Residue code, three characters or fewer (e.g. "ALA", "HOH", "NA").
    residue_id : int
        Residue sequence number within its chain.
    chain : str
        Chain identifier; empty when the format carries none.
    name : str
        Atom name (e.g. "CA"). Not used by the statistics.
    hetero : bool
        True for HETATM records.
    """

    element: str
    residue: str
    residue_id: int
    chain: str
    name: str = ""
    hetero: bool = False


@dataclass(frozen=True)
class Molecule:
    """Ordered, immutable sequence of atoms."""

    atoms: tuple[Atom, ...] = field(default_factory=tuple)

    @classmethod
    def from_atoms(cls, atoms: Iterable[Atom]) -> "Molecule":
        """Build a Molecule from any iterable of atoms, preserving order."""
        return cls(atoms=tuple(atoms))

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)
