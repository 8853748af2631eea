"""
Structure registry: the ordered collection of loaded structures and uploaded files.

Every mutation is synchronous and all-or-nothing. Collections are swapped in whole,
so a reader never sees a partially applied batch, and the selection indices are
re-clamped in the same step as any deletion.
"""

from collections.abc import Iterable, Iterator, Sequence
from contextlib import AbstractContextManager

from structview.core.events import EventChannel, Listener
from structview.exceptions import DuplicateIdError, IndexOutOfRangeError
from structview.schema.events import RegistryEvent, RegistryEventKind
from structview.schema.structure import LoadedStructure, UploadedFileEntry
from structview.utils.logging import get_logger
from structview.utils.validation import validate_index


def _reclamp(selected: int | None, deleted: int) -> int | None:
    # keep the selection on the same logical entry after removing index `deleted`
    if selected is None or selected < deleted:
        return selected
    if selected == deleted:
        return None
    return selected - 1


class StructureRegistry:
    """
    Holds loaded structures, uploaded file entries and the active selections.

    Parameters
    ----------
    verbose : bool, optional
        If True, enables detailed logging output.

    Examples
    --------
    >>> registry = StructureRegistry()
    >>> registry.add_loaded_structures([LoadedStructure("a.pdb", "a.pdb", StructureSource.FILE)])
    >>> len(registry)
    1
    """

    def __init__(self, verbose: bool = False) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._structures: tuple[LoadedStructure, ...] = ()
        self._files: tuple[UploadedFileEntry, ...] = ()
        self._selected_index: int | None = None
        self._selected_structure_index: int | None = None
        self._events = EventChannel(self.logger)

    # ---- read access ----

    @property
    def structures(self) -> tuple[LoadedStructure, ...]:
        """tuple[LoadedStructure, ...]: Loaded structures in display order."""
        return self._structures

    @property
    def files(self) -> tuple[UploadedFileEntry, ...]:
        """tuple[UploadedFileEntry, ...]: Uploaded files that parsed successfully."""
        return self._files

    @property
    def selected_index(self) -> int | None:
        """int or None: Index of the active file entry."""
        return self._selected_index

    @property
    def selected_file(self) -> UploadedFileEntry | None:
        """UploadedFileEntry or None: The active file entry."""
        if self._selected_index is None:
            return None
        return self._files[self._selected_index]

    @property
    def selected_structure_index(self) -> int | None:
        """int or None: Index of the active loaded structure (caller-owned)."""
        return self._selected_structure_index

    @property
    def ids(self) -> list[str]:
        """list[str]: Ids of the loaded structures in display order."""
        return [structure.id for structure in self._structures]

    def get_structure(self, structure_id: str) -> LoadedStructure:
        """Get a loaded structure by id."""
        for structure in self._structures:
            if structure.id == structure_id:
                return structure
        raise KeyError(f"No loaded structure with id {structure_id!r}")

    def __len__(self) -> int:
        """Get the number of loaded structures."""
        return len(self._structures)

    def __iter__(self) -> Iterator[LoadedStructure]:
        """Iterate over loaded structures in display order."""
        return iter(self._structures)

    def __contains__(self, structure_id: object) -> bool:
        return any(structure.id == structure_id for structure in self._structures)

    # ---- subscriptions ----

    def subscribe(self, listener: Listener) -> Listener:
        """Register a listener called with a :class:`RegistryEvent` after each successful mutation."""
        return self._events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered listener."""
        self._events.unsubscribe(listener)

    def deferred_events(self) -> AbstractContextManager[None]:
        """
        Context manager delaying notifications until a group of mutations has been applied.

        Examples
        --------
        >>> with registry.deferred_events():
        ...     registry.add_loaded_structures(structures)
        ...     registry.add_files(files)
        """
        return self._events.hold()

    # ---- mutations ----

    def add_loaded_structures(self, batch: Iterable[LoadedStructure]) -> None:
        """
        Append a batch of structures atomically.

        Parameters
        ----------
        batch : Iterable[LoadedStructure]
            Structures to append, in display order.

        Raises
        ------
        DuplicateIdError
            If an incoming id is already loaded or appears twice in the batch. The registry is left unchanged.
        """
        batch = tuple(batch)
        existing = set(self.ids)
        seen: set[str] = set()
        duplicates: list[str] = []
        for structure in batch:
            if structure.id in existing or structure.id in seen:
                duplicates.append(structure.id)
            seen.add(structure.id)

        if duplicates:
            self.logger.error(f"Rejected structure batch with duplicate id(s): {duplicates}")
            raise DuplicateIdError(duplicates)
        if not batch:
            return

        self._structures = self._structures + batch
        self.logger.debug(f"Added {len(batch)} structure(s); {len(self._structures)} loaded")
        self._events.emit(RegistryEvent(RegistryEventKind.STRUCTURES_ADDED, batch))

    def add_files(self, batch: Iterable[UploadedFileEntry]) -> None:
        """Append a batch of uploaded file entries."""
        batch = tuple(batch)
        if not batch:
            return

        self._files = self._files + batch
        self.logger.debug(f"Added {len(batch)} file(s); {len(self._files)} uploaded")
        self._events.emit(RegistryEvent(RegistryEventKind.FILES_ADDED, batch))

    def delete_structure(self, index: int) -> LoadedStructure:
        """
        Remove the structure at ``index`` and re-clamp the structure selection.

        Returns
        -------
        LoadedStructure
            The removed structure.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` does not address a loaded structure.
        """
        if not validate_index(index, len(self._structures)):
            raise IndexOutOfRangeError(index, len(self._structures), "structures")

        removed = self._structures[index]
        self._structures = self._structures[:index] + self._structures[index + 1 :]
        self._selected_structure_index = _reclamp(self._selected_structure_index, index)
        self.logger.debug(f"Deleted structure {removed.id!r} at index {index}")
        self._events.emit(RegistryEvent(RegistryEventKind.STRUCTURE_DELETED, removed))
        return removed

    def delete_file(self, index: int) -> UploadedFileEntry:
        """
        Remove the file entry at ``index`` and re-clamp the file selection.

        Deleting the selected entry clears the selection; deleting an entry below it
        shifts the selection down by one so it keeps pointing at the same file.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` does not address a file entry.
        """
        if not validate_index(index, len(self._files)):
            raise IndexOutOfRangeError(index, len(self._files), "files")

        removed = self._files[index]
        self._files = self._files[:index] + self._files[index + 1 :]
        self._selected_index = _reclamp(self._selected_index, index)
        self.logger.debug(f"Deleted file {removed.name!r} at index {index}")
        self._events.emit(RegistryEvent(RegistryEventKind.FILE_DELETED, removed))
        return removed

    def set_selected_index(self, index: int | None) -> None:
        """
        Select the file entry at ``index``, or clear the selection with None.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` is not None and does not address a file entry.
        """
        if index is not None and not validate_index(index, len(self._files)):
            raise IndexOutOfRangeError(index, len(self._files), "files")
        if index == self._selected_index:
            return

        self._selected_index = index
        self._events.emit(RegistryEvent(RegistryEventKind.SELECTION_CHANGED, index))

    def set_selected_structure_index(self, index: int | None) -> None:
        """Select the loaded structure at ``index``, or clear the selection with None."""
        if index is not None and not validate_index(index, len(self._structures)):
            raise IndexOutOfRangeError(index, len(self._structures), "structures")
        if index == self._selected_structure_index:
            return

        self._selected_structure_index = index
        self._events.emit(RegistryEvent(RegistryEventKind.STRUCTURE_SELECTION_CHANGED, index))

    def reset(self) -> None:
        """Remove every structure and file and clear both selections."""
        self._structures = ()
        self._files = ()
        self._selected_index = None
        self._selected_structure_index = None
        self.logger.debug("Registry reset")
        self._events.emit(RegistryEvent(RegistryEventKind.RESET))
