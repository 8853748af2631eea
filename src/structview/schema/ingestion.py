"""Typed outcome of one ingestion batch."""

from dataclasses import dataclass

from structview.schema.structure import RawFile, UploadedFileEntry


@dataclass(frozen=True)
class ParseFailure:
    """A file excluded from a batch, with the reason it failed to parse."""

    file: RawFile
    reason: str

    @property
    def name(self) -> str:
        """str: Name of the failed file."""
        return self.file.name


@dataclass(frozen=True)
class IngestionResult:
    """
    Successes and failures of an ingestion batch.

    Attributes
    ----------
    successes : tuple[UploadedFileEntry, ...]
        Parsed files, in original input order.
    failures : tuple[ParseFailure, ...]
        Files that failed to parse, in original input order.
    committed : bool
        True if the successes were appended to the registry.
    """

    successes: tuple[UploadedFileEntry, ...] = ()
    failures: tuple[ParseFailure, ...] = ()
    committed: bool = False

    @property
    def submitted(self) -> int:
        """int: Number of files submitted."""
        return len(self.successes) + len(self.failures)

    @property
    def all_failed(self) -> bool:
        """bool: True if files were submitted and none parsed."""
        return self.submitted > 0 and not self.successes

    @property
    def failed_names(self) -> list[str]:
        """list[str]: Names of the files that failed."""
        return [failure.name for failure in self.failures]
