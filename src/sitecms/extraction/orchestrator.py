"""Run classification and extraction over every candidate page of a site."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

from sitecms.extraction.classifier import ItemClassifier
from sitecms.extraction.dedupe import PageRegistry
from sitecms.extraction.extractors.base import RecordExtractor
from sitecms.extraction.models import DocumentDigest, ExtractionResult, ItemType, SkipReason, SkippedItem
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.site_index import SiteIndex

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A page to classify; ``digest`` is None when it must be read from HTML."""

    slug: str
    digest: DocumentDigest | None


class ExtractionOrchestrator:
    """Classify each page and dispatch it to the extractor for its category."""

    def __init__(self, site: SiteDirectory, classifier: ItemClassifier | None = None) -> None:
        self._site = site
        self._classifier = classifier or ItemClassifier()
        self._extractors: dict[ItemType, RecordExtractor] = {}

    @property
    def extractors(self) -> dict[ItemType, RecordExtractor]:
        return dict(self._extractors)

    def register_extractor(self, item_type: ItemType, extractor: RecordExtractor) -> None:
        if item_type is ItemType.UNKNOWN:
            raise ValueError("Unknown items are never extracted")
        self._extractors[item_type] = extractor

    def iter_candidates(self, index: SiteIndex | None = None) -> Iterator[Candidate]:
        """Site index entries when an index is given, else the item directory listing."""

        if index is not None:
            for slug, digest in index.items_under(self._site.url_prefix):
                yield Candidate(slug=slug, digest=digest)
            return
        for slug in self._site.list_slugs():
            yield Candidate(slug=slug, digest=None)

    def run(self, index: SiteIndex | None = None) -> ExtractionResult:
        result = ExtractionResult()
        registry = PageRegistry()

        for candidate in self.iter_candidates(index):
            self._process(candidate, registry, result)

        LOGGER.info(
            "Extracted %d people, %d news items, %d publications (%d skipped)",
            len(result.people),
            len(result.news),
            len(result.publications),
            len(result.skipped),
        )
        return result

    def _process(self, candidate: Candidate, registry: PageRegistry, result: ExtractionResult) -> None:
        slug = candidate.slug

        decision = registry.claim_slug(slug)
        if decision.is_duplicate:
            self._skip(result, slug, ItemType.UNKNOWN, SkipReason.DUPLICATE_SLUG)
            return

        document = None
        digest = candidate.digest
        if digest is None:
            document = self._site.load_document(slug)
            if document is None:
                self._skip(result, slug, ItemType.UNKNOWN, SkipReason.MISSING_SOURCE)
                return
            digest = document.digest

        # An index digest is authoritative for classification even when the HTML says otherwise.
        item_type = self._classifier.classify(slug, digest)
        extractor = self._extractors.get(item_type)
        if item_type is ItemType.UNKNOWN:
            self._skip(result, slug, item_type, SkipReason.UNCLASSIFIED)
            return
        if extractor is None:
            self._skip(result, slug, item_type, SkipReason.REJECTED)
            return

        if document is None:
            document = self._site.load_document(slug, digest)
            if document is None:
                self._skip(result, slug, item_type, SkipReason.MISSING_SOURCE)
                return

        if registry.claim_content(slug, document.html).is_duplicate:
            self._skip(result, slug, item_type, SkipReason.DUPLICATE_CONTENT)
            return

        try:
            record = extractor.extract(document)
        except Exception:
            LOGGER.exception("Extraction failed for %s (%s)", slug, item_type.value)
            record = None

        if record is None:
            self._skip(result, slug, item_type, SkipReason.REJECTED)
            return

        result.add(record)
        LOGGER.debug("Extracted %s as %s", slug, item_type.value)

    def _skip(self, result: ExtractionResult, slug: str, item_type: ItemType, reason: SkipReason) -> None:
        LOGGER.info("Skipped %s (%s): %s", slug, item_type.value, reason.value)
        result.skipped.append(SkippedItem(slug=slug, item_type=item_type, reason=reason))
