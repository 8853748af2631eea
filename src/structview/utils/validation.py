"""
Contains generic input validation utilities used across structview modules.

These functions are stateless and reusable, designed to enforce type, value, and structural constraints
without introducing domain-specific logic.
"""

import math
import os
from pathlib import Path


def validate_path(path: str | Path, suffixes: tuple[str, ...] = ()) -> Path:
    """
    Resolve a file path and check that it can be read.

    Parameters
    ----------
    path : str or Path
        Path to the structure file.
    suffixes : tuple[str, ...], optional
        Accepted file suffixes (lowercase, with leading dot). Empty accepts any suffix.

    Returns
    -------
    Path
        Resolved path.
    """
    # check type of path
    if not isinstance(path, (str, Path)):
        raise TypeError(f"Expected a string path, got {type(path).__name__}: {path}")

    path = Path(path).resolve()

    if not path.is_file():
        raise FileNotFoundError(f"Path is not a file: {path}")

    if suffixes and path.suffix.lower() not in suffixes:
        raise ValueError(f"Suffix {path.suffix} is not one of: {', '.join(suffixes)}")

    if not os.access(path, os.R_OK):
        raise PermissionError(f"Cannot read file: {path}")

    return path


def validate_index(index: int, length: int) -> bool:
    """Return True if ``index`` addresses an element of a sequence of ``length``."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < length


def is_in_range(value: object, lower: float, upper: float) -> bool:
    """Return True if ``value`` is a finite real number within ``[lower, upper]``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if math.isnan(value):
        return False
    return lower <= value <= upper
