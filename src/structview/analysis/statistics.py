"""
Statistics engine: aggregate composition figures derived from a molecule's atom records.

All functions here are pure; they read atoms and return new immutable values.
"""

import locale
from collections import defaultdict
from collections.abc import Iterable
from types import MappingProxyType

import numpy as np

from structview.data.residues import is_ion, is_water
from structview.schema.molecule import Molecule
from structview.schema.stats import ChainInfo, MoleculeStats, StructureSummary
from structview.schema.structure import LoadedStructure


def compute_stats(molecule: Molecule) -> MoleculeStats:
    """
    Compute composition statistics for a molecule in a single pass over its atoms.

    Parameters
    ----------
    molecule : Molecule
        Parsed molecule.

    Returns
    -------
    MoleculeStats
        Element, residue, chain, water and ion totals. An empty molecule yields all-zero stats.

    Notes
    -----
    - A chain's ``residue_count`` counts distinct residue ids seen on that chain.
    - Water is ``HOH`` or ``WAT``; ions follow :func:`structview.data.residues.is_ion`
      and are only tested for non-water residues.
    - Chains are ordered by locale collation (:func:`locale.strxfrm`, no numeric
      grouping), elements lexicographically.
    """
    elements: set[str] = set()
    residue_counts: dict[str, int] = defaultdict(int)
    chain_residues: dict[str, set[int]] = defaultdict(set)
    chain_atoms: dict[str, int] = defaultdict(int)
    water_count = 0
    ion_count = 0

    for atom in molecule.atoms:
        elements.add(atom.element)
        residue_counts[atom.residue] += 1
        chain_residues[atom.chain].add(atom.residue_id)
        chain_atoms[atom.chain] += 1

        if is_water(atom.residue):
            water_count += 1
        elif is_ion(atom.residue):
            ion_count += 1

    # plain collation order under the process locale: "A10" sorts before "A2"
    chains = sorted(chain_atoms.items(), key=lambda item: (locale.strxfrm(item[0]), item[0]))
    chain_info = tuple(
        ChainInfo(chain_id=chain_id, residue_count=len(chain_residues[chain_id]), atom_count=atom_count)
        for chain_id, atom_count in chains
    )

    return MoleculeStats(
        total_atoms=len(molecule.atoms),
        unique_elements=tuple(sorted(elements)),
        residue_counts=MappingProxyType(dict(residue_counts)),
        chain_info=chain_info,
        water_count=water_count,
        ion_count=ion_count,
    )


def chain_atom_shares(stats: MoleculeStats) -> dict[str, float]:
    """
    Percentage of the molecule's atoms held by each chain.

    Returns 0.0 for every chain when the molecule has no atoms.
    """
    if not stats.chain_info:
        return {}

    counts = np.array([chain.atom_count for chain in stats.chain_info], dtype=np.float64)
    if stats.total_atoms == 0:
        shares = np.zeros_like(counts)
    else:
        shares = counts / stats.total_atoms * 100.0

    return {chain.chain_id: float(share) for chain, share in zip(stats.chain_info, shares)}


def summarize_structures(structures: Iterable[LoadedStructure]) -> list[StructureSummary]:
    """Statistics for every structure that has geometry, in the given order."""
    return [
        StructureSummary(id=structure.id, name=structure.name, source=structure.source, stats=compute_stats(structure.molecule))
        for structure in structures
        if structure.molecule is not None
    ]
