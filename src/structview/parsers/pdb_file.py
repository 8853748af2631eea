"""Read ATOM/HETATM records from PDB-format text into a Molecule using Biopython."""

import io
from collections.abc import Iterator

from Bio.PDB.Model import Model
from Bio.PDB.PDBExceptions import PDBConstructionException
from Bio.PDB.PDBParser import PDBParser

from structview.exceptions import ParseError
from structview.schema.molecule import Atom, Molecule
from structview.schema.structure import RawFile
from structview.utils.logging import get_logger


class PdbParser:
    """
    Parse the coordinate records of a PDB file with :class:`Bio.PDB.PDBParser`.

    Only the first model is read. Atoms are listed chain by chain, residue by residue,
    in the order Biopython builds them; an atom with alternate locations counts once.
    Element symbols come from columns 77-78, or are derived from the atom name by
    Biopython when those columns are blank.

    Parameters
    ----------
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    suffixes = (".pdb", ".ent")

    def __init__(self, verbose: bool = False) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def __call__(self, raw_file: RawFile) -> Molecule:
        return self.parse(raw_file)

    def parse(self, raw_file: RawFile) -> Molecule:
        """
        Parse a PDB payload.

        Parameters
        ----------
        raw_file : RawFile
            File to parse.

        Returns
        -------
        Molecule
            Atoms of the first model.

        Raises
        ------
        ParseError
            If the payload is not text, a coordinate record is malformed, or no atom record is found.
        """
        try:
            text = raw_file.text()
        except UnicodeDecodeError as e:
            raise ParseError(raw_file.name, "file is not valid UTF-8 text") from e
        if not text.strip():
            self.logger.error(f"{raw_file.name} is empty")
            raise ParseError(raw_file.name, "no ATOM/HETATM records found")

        # PDBParser keeps per-parse state, so each call gets its own instance
        parser = PDBParser(QUIET=True)
        try:
            structure = parser.get_structure(raw_file.name, io.StringIO(text))
        except (PDBConstructionException, ValueError, IndexError) as e:
            self.logger.error(f"Malformed coordinate record in {raw_file.name}: {e}")
            raise ParseError(raw_file.name, f"malformed coordinate record: {e}") from e

        models = list(structure)
        atoms = tuple(self.iter_atoms(models[0])) if models else ()
        if not atoms:
            self.logger.error(f"No ATOM/HETATM records in {raw_file.name}")
            raise ParseError(raw_file.name, "no ATOM/HETATM records found")

        if len(models) > 1:
            self.logger.debug(f"{raw_file.name} holds {len(models)} models; keeping the first")
        self.logger.debug(f"Parsed {len(atoms)} atoms from {raw_file.name}")
        return Molecule(atoms=atoms)

    @staticmethod
    def iter_atoms(model: Model) -> Iterator[Atom]:
        """Yield one Atom per atom of a Biopython model."""
        for chain in model:
            for residue in chain:
                hetfield, residue_id, _ = residue.id
                for atom in residue:
                    yield Atom(
                        element=atom.element,
                        residue=residue.get_resname().strip(),
                        residue_id=residue_id,
                        chain=chain.id.strip(),
                        name=atom.get_name(),
                        hetero=hetfield != " ",
                    )
