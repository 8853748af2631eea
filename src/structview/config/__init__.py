"""Centralized configuration."""

from structview.config.mplstyle import load_mplstyle
from structview.config.viewer_defaults import ATOM_SIZE_RANGE, load_viewer_defaults, validate_viewer_fields

__all__ = ["ATOM_SIZE_RANGE", "load_mplstyle", "load_viewer_defaults", "validate_viewer_fields"]
