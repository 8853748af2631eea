"""Change notifications emitted after successful registry and viewer mutations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RegistryEventKind(str, Enum):
    """Kind of state change."""

    STRUCTURES_ADDED = "structures_added"
    FILES_ADDED = "files_added"
    STRUCTURE_DELETED = "structure_deleted"
    FILE_DELETED = "file_deleted"
    SELECTION_CHANGED = "selection_changed"
    STRUCTURE_SELECTION_CHANGED = "structure_selection_changed"
    VIEWER_STATE_CHANGED = "viewer_state_changed"
    RESET = "reset"


@dataclass(frozen=True)
class RegistryEvent:
    """A single change notification; ``payload`` depends on ``kind``."""

    kind: RegistryEventKind
    payload: Any = None
