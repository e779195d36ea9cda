"""Duplicate detection for pages reached through overlapping sources."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib

from sitecms.extraction.models import SkipReason


@dataclass(slots=True)
class DedupeDecision:
    """Result of duplicate evaluation for one candidate page."""

    is_duplicate: bool
    reason: SkipReason | None


class PageRegistry:
    """Track slugs and page fingerprints seen during one run."""

    def __init__(self) -> None:
        self._slugs: set[str] = set()
        self._content_hashes: dict[str, str] = {}

    def claim_slug(self, slug: str) -> DedupeDecision:
        if slug in self._slugs:
            return DedupeDecision(is_duplicate=True, reason=SkipReason.DUPLICATE_SLUG)
        self._slugs.add(slug)
        return DedupeDecision(is_duplicate=False, reason=None)

    def claim_content(self, slug: str, html: str) -> DedupeDecision:
        """Flag byte-identical pages already extracted under another slug."""

        digest = fingerprint_html(html)
        owner = self._content_hashes.get(digest)
        if owner is not None and owner != slug:
            return DedupeDecision(is_duplicate=True, reason=SkipReason.DUPLICATE_CONTENT)
        self._content_hashes[digest] = slug
        return DedupeDecision(is_duplicate=False, reason=None)


def fingerprint_html(html: str) -> str:
    return hashlib.sha256(html.encode("utf-8")).hexdigest()
