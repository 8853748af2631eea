"""Suffix-based dispatch to the concrete structure parsers."""

from collections.abc import Callable

from structview.exceptions import ParseError
from structview.parsers.gro_file import GroParser
from structview.parsers.pdb_file import PdbParser
from structview.schema.molecule import Molecule
from structview.schema.structure import RawFile

ParserFn = Callable[[RawFile], Molecule]


class StructureParser:
    """
    Parser collaborator that picks a format parser from the file suffix.

    Instances hold no per-call state, so one instance may parse many files concurrently.

    Parameters
    ----------
    verbose : bool, optional
        If True, enables detailed logging output in the format parsers.
    """

    def __init__(self, verbose: bool = False) -> None:
        self._parsers: dict[str, ParserFn] = {}
        for parser in (PdbParser(verbose=verbose), GroParser(verbose=verbose)):
            for suffix in parser.suffixes:
                self._parsers[suffix] = parser

    @property
    def suffixes(self) -> tuple[str, ...]:
        """tuple[str, ...]: File suffixes with a registered parser."""
        return tuple(self._parsers)

    def __call__(self, raw_file: RawFile) -> Molecule:
        parser = self._parsers.get(raw_file.suffix)
        if parser is None:
            raise ParseError(raw_file.name, f"unsupported file type {raw_file.suffix or '(none)'!r}")
        return parser(raw_file)


def parse_structure(raw_file: RawFile) -> Molecule:
    """Parse ``raw_file`` with the parser registered for its suffix."""
    return StructureParser()(raw_file)
