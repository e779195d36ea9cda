"""Cached site index: URL path to structural digest."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Iterator, Mapping

from sitecms.extraction.models import DocumentDigest

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SiteIndex:
    """Authoritative enumeration of known pages keyed by URL path."""

    entries: dict[str, DocumentDigest] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "SiteIndex":
        entries: dict[str, DocumentDigest] = {}
        for url, entry in payload.items():
            if isinstance(entry, Mapping):
                entries[str(url)] = DocumentDigest.from_index_entry(entry)
        return cls(entries=entries)

    @classmethod
    def load(cls, path: Path) -> "SiteIndex | None":
        """Read a cached index; a missing or unreadable file yields None."""

        if not path.is_file():
            LOGGER.info("No site index at %s", path)
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable site index %s: %s", path, exc)
            return None
        if not isinstance(payload, dict):
            LOGGER.warning("Ignoring site index %s: top-level value is not an object", path)
            return None
        return cls.from_mapping(payload)

    def save(self, path: Path) -> None:
        payload = {url: digest.to_index_entry() for url, digest in self.entries.items()}
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    def items_under(self, prefix: str) -> Iterator[tuple[str, DocumentDigest]]:
        """Yield ``(slug, digest)`` for entries whose path contains *prefix*."""

        for url, digest in self.entries.items():
            if prefix not in url:
                continue
            yield slug_from_url(url, prefix), digest

    def __len__(self) -> int:
        return len(self.entries)


def slug_from_url(url: str, prefix: str) -> str:
    slug = url.replace(prefix, "")
    if slug.endswith(".html"):
        slug = slug[: -len(".html")]
    return slug.strip("/")
