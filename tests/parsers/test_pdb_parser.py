"""
Unit tests for PdbParser.

This suite covers:
- Extraction of element, residue, residue number, chain and hetero flag
- Element fallback from the atom name
- First-model-only reading
- Error handling for empty, malformed and non-text payloads
"""

import pytest

from structview.exceptions import ParseError
from structview.parsers.pdb_file import PdbParser
from structview.schema.molecule import Atom
from structview.schema.structure import RawFile


def test_parses_atom_and_hetatm_records(pdb_text):
    """ATOM and HETATM records become atoms in file order."""
    text = pdb_text(
        [
            ("N", "ALA", "A", 1, "N"),
            ("CA", "ALA", "A", 1, "C"),
            ("FE", "HEM", "B", 150, "FE", "HETATM"),
            ("NA", "NA", "B", 301, "NA", "HETATM"),
        ]
    )
    molecule = PdbParser().parse(RawFile("model.pdb", text))

    assert molecule.atoms[0] == Atom("N", "ALA", 1, "A", name="N")
    assert molecule.atoms[2] == Atom("FE", "HEM", 150, "B", name="FE", hetero=True)
    assert [atom.residue for atom in molecule.atoms] == ["ALA", "ALA", "HEM", "NA"]


def test_element_falls_back_to_atom_name():
    """Blank element columns fall back to the first letter of the atom name."""
    line = "ATOM      1  CA  GLY A   7      11.104   6.134  -6.504  1.00  0.00"
    molecule = PdbParser().parse(RawFile("short.pdb", line))
    assert molecule.atoms[0].element == "C"
    assert molecule.atoms[0].residue_id == 7


def test_only_first_model_is_read(pdb_text):
    """Records after ENDMDL are ignored."""
    model = pdb_text([("CA", "ALA", "A", 1, "C")]).replace("END\n", "")
    text = "MODEL        1\n" + model + "ENDMDL\nMODEL        2\n" + model + "ENDMDL\n"
    molecule = PdbParser().parse(RawFile("nmr.pdb", text))
    assert len(molecule) == 1


def test_no_atoms_raises():
    """A payload without coordinate records fails to parse."""
    with pytest.raises(ParseError, match="no ATOM/HETATM records found"):
        PdbParser().parse(RawFile("empty.pdb", "HEADER    NOTHING\nEND\n"))


def test_invalid_residue_number_raises(pdb_text):
    """A non-numeric residue number is a parse error."""
    text = pdb_text([("CA", "ALA", "A", 1, "C")])
    bad = text.replace("A   1", "A   X")
    with pytest.raises(ParseError, match="malformed coordinate record"):
        PdbParser().parse(RawFile("bad.pdb", bad))


def test_binary_payload_raises():
    """Payloads that are not UTF-8 text fail cleanly."""
    with pytest.raises(ParseError, match="not valid UTF-8"):
        PdbParser().parse(RawFile("binary.pdb", b"\xff\xfe\x00ATOM"))


def test_missing_coordinates_raise():
    """An ATOM record without coordinates is rejected."""
    line = "ATOM      1  CA  GLY A   7\n"
    with pytest.raises(ParseError, match="malformed coordinate record"):
        PdbParser().parse(RawFile("nocoords.pdb", line))


def test_water_hetatm_is_hetero_and_keeps_residue(pdb_text):
    """HETATM waters keep their residue code and are flagged as hetero atoms."""
    text = pdb_text([("CA", "ALA", "A", 1, "C"), ("O", "HOH", "A", 100, "O", "HETATM")])
    molecule = PdbParser().parse(RawFile("solvated.pdb", text))
    assert molecule.atoms[1] == Atom("O", "HOH", 100, "A", name="O", hetero=True)
    assert not molecule.atoms[0].hetero


def test_atoms_grouped_by_chain(pdb_text):
    """Atoms are listed chain by chain even when the records interleave."""
    text = pdb_text(
        [
            ("CA", "ALA", "A", 1, "C"),
            ("CA", "GLY", "B", 1, "C"),
            ("CB", "ALA", "A", 1, "C"),
        ]
    )
    molecule = PdbParser().parse(RawFile("interleaved.pdb", text))
    assert [(atom.chain, atom.name) for atom in molecule.atoms] == [("A", "CA"), ("A", "CB"), ("B", "CA")]


def test_blank_payload_raises():
    """Whitespace-only payloads have no atom records."""
    with pytest.raises(ParseError, match="no ATOM/HETATM records found"):
        PdbParser().parse(RawFile("blank.pdb", "\n  \n"))
