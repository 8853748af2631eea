"""Shared fixtures: PDB text builder, small molecules and a stub parser."""

import matplotlib

matplotlib.use("Agg")

import pytest

from structview.exceptions import ParseError
from structview.schema.molecule import Atom, Molecule
from structview.schema.structure import RawFile


def format_pdb_atom(serial, name, residue, chain, residue_id, element, record="ATOM"):
    """Format one fixed-column PDB ATOM/HETATM record."""
    return (
        f"{record:<6}{serial:>5} {name:<4} {residue:>3} {chain:1}{residue_id:>4}    "
        f"{0.0:>8.3f}{0.0:>8.3f}{0.0:>8.3f}{1.0:>6.2f}{0.0:>6.2f}          {element:>2}"
    )


@pytest.fixture
def pdb_text():
    """Return a builder turning (name, residue, chain, residue_id, element[, record]) rows into PDB text."""

    def build(rows):
        lines = ["HEADER    TEST STRUCTURE"]
        for serial, row in enumerate(rows, start=1):
            lines.append(format_pdb_atom(serial, *row))
        lines.append("END")
        return "\n".join(lines) + "\n"

    return build


@pytest.fixture
def protein_with_water():
    """
    Two chains plus solvent.

    Chain A: ALA 1 (2 atoms), GLY 2 (1 atom). Chain B: ALA 1 (1 atom).
    Solvent on chain A: HOH 100 (1 atom), NA 201 (1 atom).
    """
    return Molecule.from_atoms(
        [
            Atom("N", "ALA", 1, "A"),
            Atom("C", "ALA", 1, "A"),
            Atom("C", "GLY", 2, "A"),
            Atom("O", "ALA", 1, "B"),
            Atom("O", "HOH", 100, "A"),
            Atom("NA", "NA", 201, "A"),
        ]
    )


class StubParser:
    """Parser collaborator returning a one-atom molecule unless the file name contains 'bad'."""

    def __call__(self, raw_file: RawFile) -> Molecule:
        if "bad" in raw_file.name:
            raise ParseError(raw_file.name, "unreadable")
        return Molecule.from_atoms([Atom("C", "LIG", 1, "A")])


@pytest.fixture
def stub_parser():
    return StubParser()
