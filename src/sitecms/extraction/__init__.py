"""Page classification and record extraction interfaces."""

from .classifier import ItemClassifier, classify
from .models import ExtractionResult, ItemType
from .orchestrator import ExtractionOrchestrator
from .site import SiteDirectory
from .site_index import SiteIndex

__all__ = [
    "ExtractionOrchestrator",
    "ExtractionResult",
    "ItemClassifier",
    "ItemType",
    "SiteDirectory",
    "SiteIndex",
    "classify",
]
