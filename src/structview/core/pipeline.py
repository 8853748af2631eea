"""
Ingestion pipeline: parse uploaded structure files concurrently and commit the successes.

Parsing happens in worker threads; the registry is only touched on the event loop after
every parse task of the batch has settled, and overlapping ``ingest`` calls are queued.
"""

import asyncio
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from structview.core.registry import StructureRegistry
from structview.exceptions import ParseError
from structview.parsers.structure_parser import StructureParser
from structview.schema.ingestion import IngestionResult, ParseFailure
from structview.schema.molecule import Molecule
from structview.schema.structure import LoadedStructure, RawFile, StructureSource, UploadedFileEntry
from structview.utils.logging import get_logger

Parser = Callable[[RawFile], Molecule]

# a parsed file together with its decoded text
_Parsed = tuple[UploadedFileEntry, str]


class IngestionPipeline:
    """
    Orchestrates parsing and registry commits for batches of uploaded files.

    Parameters
    ----------
    registry : StructureRegistry
        Registry that receives successful batches.
    parser : Callable[[RawFile], Molecule], optional
        Parser collaborator; must not share mutable state across calls. Defaults to
        :class:`structview.parsers.StructureParser`.
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(self, registry: StructureRegistry, parser: Parser | None = None, verbose: bool = False) -> None:
        self.registry = registry
        self.parser = parser or StructureParser(verbose=verbose)
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    async def ingest(self, files: Iterable[RawFile]) -> IngestionResult:
        """
        Parse ``files`` and commit the ones that parse as a single batch.

        Parameters
        ----------
        files : Iterable[RawFile]
            Files to ingest, in display order.

        Returns
        -------
        IngestionResult
            Successes and failures in input order. ``all_failed`` is set when nothing parsed,
            in which case the registry and the selection are left untouched.

        Raises
        ------
        DuplicateIdError
            If a parsed file's name is already loaded or repeated in the batch; nothing is committed.
        """
        files = list(files)
        async with self._get_lock():
            if not files:
                self.logger.debug("No files submitted")
                return IngestionResult()

            self.logger.info(f"Ingesting {len(files)} file(s)")
            outcomes = await asyncio.gather(*(self._parse_one(raw_file) for raw_file in files))

            parsed = [outcome for outcome in outcomes if not isinstance(outcome, ParseFailure)]
            failures = tuple(outcome for outcome in outcomes if isinstance(outcome, ParseFailure))

            if failures:
                self.logger.warning(f"Failed to process files: {[failure.name for failure in failures]}")

            if not parsed:
                self.logger.error("No files were processed successfully")
                return IngestionResult(failures=failures)

            self._commit(parsed)
            return IngestionResult(
                successes=tuple(entry for entry, _ in parsed),
                failures=failures,
                committed=True,
            )

    async def ingest_paths(self, paths: Sequence[str | Path]) -> IngestionResult:
        """Read structure files from disk and ingest them."""
        return await self.ingest([RawFile.from_path(path) for path in paths])

    def _get_lock(self) -> asyncio.Lock:
        # an asyncio.Lock is bound to the loop it first waits on; keep one per running loop
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _parse_one(self, raw_file: RawFile) -> _Parsed | ParseFailure:
        self.logger.debug(f"Processing file: {raw_file.name}")
        try:
            molecule = await asyncio.to_thread(self.parser, raw_file)
            text = raw_file.text()
        except ParseError as e:
            self.logger.warning(f"Error processing file {raw_file.name}: {e.reason}")
            return ParseFailure(file=raw_file, reason=e.reason)
        except Exception as e:
            # the parser is an external collaborator; any failure excludes just this file
            self.logger.warning(f"Error processing file {raw_file.name}: {e!r}")
            return ParseFailure(file=raw_file, reason=str(e) or type(e).__name__)

        return UploadedFileEntry(file=raw_file, molecule=molecule), text

    def _commit(self, parsed: list[_Parsed]) -> None:
        structures = [
            LoadedStructure(
                id=entry.name,
                name=entry.name,
                source=StructureSource.FILE,
                molecule=entry.molecule,
                raw_data=text,
            )
            for entry, text in parsed
        ]
        # listeners only hear about the batch once structures, files and selection are all in place
        with self.registry.deferred_events():
            # structures first: a duplicate id aborts before the file batch is appended
            self.registry.add_loaded_structures(structures)
            self.registry.add_files(entry for entry, _ in parsed)
            self.logger.info(f"Committed {len(structures)} structure(s)")

            if self.registry.selected_index is None:
                self.logger.debug("Auto-selecting first file")
                self.registry.set_selected_index(0)
