"""structview package."""

from structview._version import __version__
from structview.analysis.statistics import compute_stats
from structview.core.registry import StructureRegistry
from structview.core.session import VisualizeSession
from structview.core.viewer import ViewerStateCoordinator
from structview.parsers.structure_parser import parse_structure

__all__ = [
    "StructureRegistry",
    "ViewerStateCoordinator",
    "VisualizeSession",
    "__version__",
    "compute_stats",
    "parse_structure",
]
