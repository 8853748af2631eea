"""Structure file parsers (PDB and GROMACS .gro)."""

from structview.parsers.gro_file import GroParser
from structview.parsers.pdb_file import PdbParser
from structview.parsers.structure_parser import StructureParser, parse_structure

__all__ = ["GroParser", "PdbParser", "StructureParser", "parse_structure"]
