"""Derived per-structure statistics; recomputed on demand and never persisted."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from structview.schema.structure import StructureSource


@dataclass(frozen=True)
class ChainInfo:
    """Residue and atom totals for one chain."""

    chain_id: str
    residue_count: int
    atom_count: int


@dataclass(frozen=True)
class MoleculeStats:
    """
    Aggregate statistics of a single molecule.

    Attributes
    ----------
    total_atoms : int
        Number of atoms.
    unique_elements : tuple[str, ...]
        Distinct element symbols, sorted ascending.
    residue_counts : Mapping[str, int]
        Residue code mapped to the number of atoms carrying it.
    chain_info : tuple[ChainInfo, ...]
        Per-chain totals, sorted ascending by chain id.
    water_count : int
        Atoms belonging to water residues.
    ion_count : int
        Atoms classified as ions by the residue-code heuristic.
    """

    total_atoms: int = 0
    unique_elements: tuple[str, ...] = ()
    residue_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    chain_info: tuple[ChainInfo, ...] = ()
    water_count: int = 0
    ion_count: int = 0


@dataclass(frozen=True)
class StructureSummary:
    """Statistics of one loaded structure, labeled for display."""

    id: str
    name: str
    source: StructureSource
    stats: MoleculeStats
