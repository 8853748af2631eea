"""View-state coordinator: owns the viewer configuration of one session."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from structview.config.viewer_defaults import load_viewer_defaults, validate_viewer_fields
from structview.core.events import EventChannel, Listener
from structview.schema.events import RegistryEvent, RegistryEventKind
from structview.schema.viewer_state import ViewerState
from structview.utils.logging import get_logger


class ViewerStateCoordinator:
    """
    Apply partial updates to the viewer configuration.

    The configuration is independent of which structure is selected. Updates merge named
    fields into the current state and leave the others untouched.

    Parameters
    ----------
    defaults : ViewerState, optional
        Initial state; falls back to :func:`structview.config.load_viewer_defaults`.
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(self, defaults: ViewerState | None = None, verbose: bool = False) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._defaults = defaults or load_viewer_defaults()
        self._state = self._defaults
        self._events = EventChannel(self.logger)

    @property
    def state(self) -> ViewerState:
        """ViewerState: Current configuration snapshot."""
        return self._state

    def subscribe(self, listener: Listener) -> Listener:
        """Register a listener called with a VIEWER_STATE_CHANGED event carrying the new state."""
        return self._events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered listener."""
        self._events.unsubscribe(listener)

    def update(self, partial: Mapping[str, Any] | None = None, **fields: Any) -> ViewerState:
        """
        Merge named fields into the current state.

        Parameters
        ----------
        partial : Mapping[str, Any], optional
            Field names mapped to new values.
        **fields
            Additional field values; these win over ``partial`` for the same name.

        Returns
        -------
        ViewerState
            The state after the update.

        Raises
        ------
        InvalidConfigurationError
            If any field is unknown or out of its declared domain; the state is unchanged.

        Examples
        --------
        >>> coordinator = ViewerStateCoordinator()
        >>> coordinator.update({"atom_size": 1.5}).atom_size
        1.5
        >>> coordinator.update(view_mode="spacefill").view_mode
        <ViewMode.SPACEFILL: 'spacefill'>
        """
        changes = validate_viewer_fields({**(partial or {}), **fields})
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return self._state

        self._state = new_state
        self.logger.debug(f"Viewer state updated: {', '.join(changes)}")
        self._events.emit(RegistryEvent(RegistryEventKind.VIEWER_STATE_CHANGED, new_state))
        return new_state

    def reset(self) -> ViewerState:
        """Restore the initial state."""
        if self._state != self._defaults:
            self._state = self._defaults
            self._events.emit(RegistryEvent(RegistryEventKind.VIEWER_STATE_CHANGED, self._state))
        return self._state
