"""Registry, viewer state, ingestion orchestration and the session that owns them."""

from structview.core.events import EventChannel
from structview.core.pipeline import IngestionPipeline
from structview.core.registry import StructureRegistry
from structview.core.session import VisualizeSession
from structview.core.viewer import ViewerStateCoordinator

__all__ = ["EventChannel", "IngestionPipeline", "StructureRegistry", "ViewerStateCoordinator", "VisualizeSession"]
