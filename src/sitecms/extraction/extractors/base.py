"""Shared contract for per-category record extractors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sitecms.extraction.models import Document, ExtractedRecord, ItemType
from sitecms.extraction.site import SiteDirectory


@runtime_checkable
class RecordExtractor(Protocol):
    """Protocol every category extractor implements."""

    item_type: ItemType
    site: SiteDirectory

    def extract(self, document: Document) -> ExtractedRecord | None:
        """Build the category record for a loaded page, or None to reject it."""

