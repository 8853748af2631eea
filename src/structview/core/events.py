"""Explicit listener channel used by the registry and the viewer coordinator."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from structview.schema.events import RegistryEvent

Listener = Callable[[RegistryEvent], None]


class EventChannel:
    """
    Ordered set of listeners notified synchronously after a state change.

    Parameters
    ----------
    logger : logging.Logger
        Logger of the owning component.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._listeners: list[Listener] = []
        self._held: list[RegistryEvent] | None = None
        self.logger = logger

    def subscribe(self, listener: Listener) -> Listener:
        """Register ``listener``; subscribing twice has no effect. Returns the listener."""
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @contextmanager
    def hold(self) -> Iterator[None]:
        """
        Queue events emitted inside the block and deliver them once it exits.

        Used to make a multi-step mutation visible to listeners only after every step has
        been applied. Nested holds join the outermost one. Events of mutations that did apply
        are delivered even when the block raises.
        """
        if self._held is not None:
            yield
            return

        self._held = []
        try:
            yield
        finally:
            held, self._held = self._held, None
            for event in held:
                self.emit(event)

    def emit(self, event: RegistryEvent) -> None:
        """Deliver ``event`` to every listener in subscription order."""
        if self._held is not None:
            self._held.append(event)
            return

        self.logger.debug(f"Emitting {event.kind.value} to {len(self._listeners)} listener(s)")
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                self.logger.exception(f"Listener {listener!r} failed on {event.kind.value}")
                raise

    def __len__(self) -> int:
        return len(self._listeners)
