"""Error taxonomy reported by the registry, the viewer coordinator and the ingestion pipeline."""

from collections.abc import Iterable


class StructviewError(Exception):
    """Base class for all structview errors."""


class ParseError(StructviewError):
    """
    A single structure file could not be parsed.

    Recoverable: the ingestion pipeline excludes the file and reports it.

    Parameters
    ----------
    filename : str
        Name of the file that failed.
    reason : str
        Human-readable failure reason.
    """

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to parse {filename!r}: {reason}")


class DuplicateIdError(StructviewError):
    """A structure batch contains an id that is already loaded (or repeated within the batch)."""

    def __init__(self, ids: Iterable[str]) -> None:
        self.ids = tuple(ids)
        super().__init__(f"Duplicate structure id(s): {', '.join(self.ids)}")


class IndexOutOfRangeError(StructviewError, IndexError):
    """An index does not address an entry of the current collection."""

    def __init__(self, index: object, length: int, collection: str = "collection") -> None:
        self.index = index
        self.length = length
        self.collection = collection
        super().__init__(f"Index {index!r} out of range for {collection} of length {length}")


class InvalidConfigurationError(StructviewError, ValueError):
    """A viewer state update names an unknown field or a value outside its declared domain."""

    def __init__(self, field: str, value: object, reason: str = "") -> None:
        self.field = field
        self.value = value
        message = f"Invalid value {value!r} for viewer setting '{field}'"
        super().__init__(f"{message}: {reason}" if reason else message)
