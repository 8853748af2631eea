"""Structured representation of raw uploads and the structures tracked for display."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from structview.schema.molecule import Molecule
from structview.utils.validation import validate_path


class StructureSource(str, Enum):
    """Where a loaded structure came from."""

    FILE = "file"
    JOB = "job"

    @property
    def label(self) -> str:
        """str: Short display label ("File" or "Job")."""
        match self:
            case StructureSource.FILE:
                return "File"
            case StructureSource.JOB:
                return "Job"


@dataclass(frozen=True)
class RawFile:
    """
    In-memory structure file handed to the parser.

    Attributes
    ----------
    name : str
        File name including suffix; used as the loaded structure id.
    content : bytes or str
        Raw payload.
    """

    name: str
    content: bytes | str

    @property
    def suffix(self) -> str:
        """str: Lowercase file suffix including the leading dot."""
        return Path(self.name).suffix.lower()

    def text(self) -> str:
        """Return the payload as text, decoding bytes as UTF-8."""
        if isinstance(self.content, bytes):
            return self.content.decode("utf-8")
        return self.content

    @classmethod
    def from_path(cls, path: str | Path) -> "RawFile":
        """Read a structure file from disk."""
        path = validate_path(path)
        return cls(name=path.name, content=path.read_bytes())


@dataclass(frozen=True)
class UploadedFileEntry:
    """A raw upload paired with its successfully parsed molecule."""

    file: RawFile
    molecule: Molecule | None = None

    @property
    def name(self) -> str:
        """str: Name of the uploaded file."""
        return self.file.name


@dataclass(frozen=True)
class LoadedStructure:
    """
    A structure tracked by the registry for display.

    Attributes
    ----------
    id : str
        Identifier, unique within a registry.
    name : str
        Display name.
    source : StructureSource
        FILE for uploads, JOB for structures produced by an external computation.
    molecule : Molecule, optional
        Parsed geometry; None while a job-backed structure has none yet.
    raw_data : str, optional
        Original textual payload, kept for re-export or re-rendering.
    """

    id: str
    name: str
    source: StructureSource
    molecule: Molecule | None = None
    raw_data: str | None = None

    @property
    def atom_count(self) -> int | None:
        """int or None: Number of atoms, or None without geometry."""
        return len(self.molecule.atoms) if self.molecule is not None else None
