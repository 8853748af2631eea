"""
Unit tests for GroParser, which reads atom lines from GROMACS .gro payloads.

This suite covers:
- Residue, residue number and element inference
- Validation of the atom count line
- Graceful skipping of malformed atom lines, with logging
"""

import pytest

from structview.exceptions import ParseError
from structview.parsers.gro_file import GroParser
from structview.schema.structure import RawFile

# Sample minimal .gro content
SAMPLE_GRO_CONTENT = """Test GRO file
   7
    1WAT    O     1   0.000   0.000   0.000
    1WAT    H     2   0.100   0.000   0.000
    1WAT    H1    3   0.000   0.100   0.000
    2WAT    O     4   1.000   1.000   1.000
    2WAT    H     5   1.100   1.000   1.000
    2WAT    H1    6   1.000   1.100   1.000
    3NA     NA    7   0.500   0.500   0.500
   1.00000  1.00000  1.00000
"""


def test_valid_gro_file_parsing():
    """Atoms carry residue names, numbers and inferred elements; chains are empty."""
    molecule = GroParser().parse(RawFile("test.gro", SAMPLE_GRO_CONTENT))

    assert len(molecule) == 7
    assert [atom.element for atom in molecule.atoms] == ["O", "H", "H", "O", "H", "H", "NA"]
    assert {atom.residue_id for atom in molecule.atoms} == {1, 2, 3}
    assert molecule.atoms[-1].residue == "NA"
    assert all(atom.chain == "" for atom in molecule.atoms)


def test_invalid_atom_count_line():
    """Raises ParseError when the atom count line is non-numeric."""
    content = "Header\nnot_a_number\n1WAT    O     1   0.000   0.000   0.000\n1.0 1.0 1.0"
    with pytest.raises(ParseError, match="invalid atom count in line 2"):
        GroParser().parse(RawFile("bad.gro", content))


def test_too_short_file():
    """Fewer than three lines cannot be a .gro file."""
    with pytest.raises(ParseError, match="too short"):
        GroParser().parse(RawFile("short.gro", "Header\n0\n"))


def test_mixed_valid_and_invalid_lines():
    """Parses only valid atom lines when mixed with malformed ones."""
    content = "Header\n3\nbadline\nXYZ O 1 0.0 0.0 0.0\n1WAT O 1 0.0 0.0 0.0\n1.0 1.0 1.0"
    molecule = GroParser().parse(RawFile("mixed.gro", content))
    assert [(atom.residue_id, atom.residue, atom.name) for atom in molecule.atoms] == [(1, "WAT", "O")]


def test_only_invalid_lines_raise():
    """A file whose atom lines are all malformed fails to parse."""
    with pytest.raises(ParseError, match="no valid atom lines"):
        GroParser().parse(RawFile("broken.gro", "Header\n1\nbadline\n1.0 1.0 1.0"))


def test_logs_warning_for_skipped_lines(caplog):
    """Logs warnings for lines that fail to parse."""
    content = "Header\n2\nXYZ O 1 0.0 0.0 0.0\n1WAT O 1 0.0 0.0 0.0\n1.0 1.0 1.0"
    with caplog.at_level("WARNING"):
        molecule = GroParser(verbose=True).parse(RawFile("warn.gro", content))
    assert len(molecule) == 1
    assert "Failed to parse atom line 3" in caplog.text
