"""Data records shared across structview components."""

from structview.schema.events import RegistryEvent, RegistryEventKind
from structview.schema.ingestion import IngestionResult, ParseFailure
from structview.schema.molecule import Atom, Molecule
from structview.schema.stats import ChainInfo, MoleculeStats, StructureSummary
from structview.schema.structure import LoadedStructure, RawFile, StructureSource, UploadedFileEntry
from structview.schema.viewer_state import ColorScheme, ViewerState, ViewMode

__all__ = [
    "Atom",
    "ChainInfo",
    "ColorScheme",
    "IngestionResult",
    "LoadedStructure",
    "Molecule",
    "MoleculeStats",
    "ParseFailure",
    "RawFile",
    "RegistryEvent",
    "RegistryEventKind",
    "StructureSource",
    "StructureSummary",
    "UploadedFileEntry",
    "ViewMode",
    "ViewerState",
]
