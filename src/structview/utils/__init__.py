"""Infrastructure helpers."""

from structview.utils.logging import get_logger
from structview.utils.validation import is_in_range, validate_index, validate_path

__all__ = ["get_logger", "is_in_range", "validate_index", "validate_path"]
