"""Read atom lines of a GROMACS .gro file into a Molecule."""

import re
from collections.abc import Iterator

from structview.exceptions import ParseError
from structview.schema.molecule import Atom, Molecule
from structview.schema.structure import RawFile
from structview.utils.logging import get_logger

MIN_ATOM_PARTS = 2
MIN_GRO_LINES = 3


class GroParser:
    """
    Parse atom lines from a GROMACS .gro payload.

    The format has no chain identifiers, so every atom gets an empty chain. Elements are
    inferred from atom names: the full alphabetic part when it equals the residue name
    (the monatomic ion convention, e.g. ``NA``/``NA``), otherwise its first letter.

    Parameters
    ----------
    verbose : bool, optional
        If True, logs every skipped atom line.
    """

    suffixes = (".gro",)

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def __call__(self, raw_file: RawFile) -> Molecule:
        return self.parse(raw_file)

    def parse(self, raw_file: RawFile) -> Molecule:
        """
        Parse a .gro payload.

        Raises
        ------
        ParseError
            If the payload is too short, the atom count is invalid, or no atom line parses.
        """
        try:
            text = raw_file.text()
        except UnicodeDecodeError as e:
            raise ParseError(raw_file.name, "file is not valid UTF-8 text") from e

        atoms = tuple(self.iter_atoms(text, raw_file.name))
        if not atoms:
            raise ParseError(raw_file.name, "no valid atom lines found")
        return Molecule(atoms=atoms)

    def iter_atoms(self, text: str, filename: str = "<string>") -> Iterator[Atom]:
        """Yield one Atom per valid atom line; malformed lines are skipped."""
        lines = text.splitlines()
        if len(lines) < MIN_GRO_LINES:
            raise ParseError(filename, "too short to be a valid .gro file")

        try:
            n_atoms = int(lines[1].strip())
        except ValueError as e:
            self.logger.error(f"Invalid atom count in line 2: {lines[1]!r}")
            raise ParseError(filename, f"invalid atom count in line 2: {lines[1]!r}") from e

        atom_lines = lines[2 : 2 + n_atoms]
        for i, line in enumerate(atom_lines, start=3):
            try:
                yield self._parse_atom_line(line)
            except ValueError as e:
                if self.verbose:
                    self.logger.warning(f"Failed to parse atom line {i}: {line!r}: {e}")
                continue

    def _parse_atom_line(self, line: str) -> Atom:
        parts = line.strip().split()
        if len(parts) < MIN_ATOM_PARTS:
            raise ValueError("Line too short")

        fused = parts[0]
        atom_name = parts[1]
        match = re.match(r"(\d+)([A-Za-z][A-Za-z0-9+-]*)$", fused)
        if not match:
            raise ValueError(f"Invalid fused field: {fused!r}")

        residue_id = int(match.group(1))
        residue = match.group(2)
        letters = "".join(filter(str.isalpha, atom_name)).upper()
        if not letters:
            raise ValueError(f"Atom name has no element letters: {atom_name!r}")
        element = letters if letters == residue.upper() else letters[0]

        return Atom(element=element, residue=residue, residue_id=residue_id, chain="", name=atom_name)
