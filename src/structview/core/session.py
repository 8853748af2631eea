"""
Viewing session: the explicitly owned context object tying registry, viewer state and ingestion together.

Each session is independent; nothing is shared at module level, and a full reinitialization is a
new session or a call to :meth:`VisualizeSession.reset`.
"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from structview.analysis.statistics import compute_stats, summarize_structures
from structview.core.events import Listener
from structview.core.pipeline import IngestionPipeline, Parser
from structview.core.registry import StructureRegistry
from structview.core.viewer import ViewerStateCoordinator
from structview.exceptions import ParseError
from structview.schema.ingestion import IngestionResult
from structview.schema.molecule import Molecule
from structview.schema.stats import MoleculeStats, StructureSummary
from structview.schema.structure import LoadedStructure, RawFile, StructureSource
from structview.schema.viewer_state import ViewerState
from structview.utils.logging import get_logger


class VisualizeSession:
    """
    One structure-viewing session.

    Parameters
    ----------
    parser : Callable[[RawFile], Molecule], optional
        Parser collaborator used for uploads and job payloads. Defaults to suffix-based PDB/GRO parsing.
    viewer_defaults : ViewerState, optional
        Initial viewer configuration.
    verbose : bool, optional
        If True, enables detailed logging output.

    Attributes
    ----------
    registry : StructureRegistry
        Loaded structures, uploaded files and selections.
    viewer : ViewerStateCoordinator
        Display configuration.
    pipeline : IngestionPipeline
        Upload ingestion bound to ``registry``.
    """

    def __init__(
        self,
        parser: Parser | None = None,
        viewer_defaults: ViewerState | None = None,
        verbose: bool = False,
    ) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self.registry = StructureRegistry(verbose=verbose)
        self.viewer = ViewerStateCoordinator(viewer_defaults, verbose=verbose)
        self.pipeline = IngestionPipeline(self.registry, parser=parser, verbose=verbose)

    @property
    def viewer_state(self) -> ViewerState:
        """ViewerState: Current display configuration."""
        return self.viewer.state

    async def ingest(self, files: Iterable[RawFile]) -> IngestionResult:
        """Parse and commit uploaded files; see :meth:`IngestionPipeline.ingest`."""
        return await self.pipeline.ingest(files)

    async def ingest_paths(self, paths: Sequence[str | Path]) -> IngestionResult:
        """Parse and commit structure files read from disk."""
        return await self.pipeline.ingest_paths(paths)

    def add_job_structure(
        self,
        job_id: str,
        name: str | None = None,
        raw_data: str | None = None,
        molecule: Molecule | None = None,
    ) -> LoadedStructure:
        """
        Load a structure produced by an external job.

        When only ``raw_data`` is given it is parsed as PDB text by the session's parser
        collaborator (as a file named ``<job_id>.pdb``); if that fails the structure is still
        loaded, without geometry, and the failure is logged.

        Raises
        ------
        DuplicateIdError
            If ``job_id`` is already loaded.
        """
        if molecule is None and raw_data is not None:
            try:
                molecule = self.pipeline.parser(RawFile(name=f"{job_id}.pdb", content=raw_data))
            except ParseError as e:
                self.logger.warning(f"Job {job_id} has no usable geometry yet: {e.reason}")
            except Exception as e:
                self.logger.warning(f"Job {job_id} has no usable geometry yet: {e!r}")

        structure = LoadedStructure(
            id=job_id,
            name=name or job_id,
            source=StructureSource.JOB,
            molecule=molecule,
            raw_data=raw_data,
        )
        self.registry.add_loaded_structures([structure])
        return structure

    def update_viewer_state(self, partial: Mapping[str, Any] | None = None, **fields: Any) -> ViewerState:
        """Merge fields into the viewer state; see :meth:`ViewerStateCoordinator.update`."""
        return self.viewer.update(partial, **fields)

    def structure_stats(self) -> list[StructureSummary]:
        """Statistics of every loaded structure that has geometry, in display order."""
        return summarize_structures(self.registry.structures)

    def stats_for(self, structure_id: str) -> MoleculeStats | None:
        """Statistics of one loaded structure, or None if it has no geometry."""
        structure = self.registry.get_structure(structure_id)
        if structure.molecule is None:
            return None
        return compute_stats(structure.molecule)

    def render_snapshot(self) -> tuple[tuple[LoadedStructure, ...], ViewerState]:
        """Everything the renderer reads: the structures and the current viewer state."""
        return self.registry.structures, self.viewer.state

    def subscribe(self, listener: Listener) -> Listener:
        """Register ``listener`` for both registry and viewer state changes."""
        self.registry.subscribe(listener)
        self.viewer.subscribe(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener`` from both channels."""
        self.registry.unsubscribe(listener)
        self.viewer.unsubscribe(listener)

    def reset(self) -> None:
        """Clear every loaded structure and file and restore the default viewer state."""
        self.registry.reset()
        self.viewer.reset()
