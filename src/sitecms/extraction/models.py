"""Canonical data structures shared by the classifier, extractors and writers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

_HEADING_LEVELS = range(1, 7)


class ItemType(str, Enum):
    """Semantic category assigned to one exported page."""

    PERSON = "person"
    NEWS = "news"
    PUBLICATION = "publication"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class DocumentDigest:
    """Structural summary of a page: heading texts by level and paragraph texts."""

    headings: Mapping[int, tuple[str, ...]] = field(default_factory=dict)
    paragraphs: tuple[str, ...] = ()

    def headings_at(self, level: int) -> tuple[str, ...]:
        return tuple(self.headings.get(level, ()))

    def first_heading(self, level: int) -> str:
        texts = self.headings_at(level)
        return texts[0] if texts else ""

    @classmethod
    def from_index_entry(cls, entry: Mapping[str, Any]) -> "DocumentDigest":
        """Build a digest from a site index entry such as ``{"h1": [...], "p": [...]}``."""

        headings: dict[int, tuple[str, ...]] = {}
        for level in _HEADING_LEVELS:
            values = entry.get(f"h{level}")
            if isinstance(values, list):
                headings[level] = tuple(str(value) for value in values if value is not None)

        raw_paragraphs = entry.get("p")
        paragraphs: tuple[str, ...] = ()
        if isinstance(raw_paragraphs, list):
            paragraphs = tuple(str(value) for value in raw_paragraphs if value is not None)
        return cls(headings=headings, paragraphs=paragraphs)

    def to_index_entry(self) -> dict[str, list[str]]:
        entry: dict[str, list[str]] = {
            f"h{level}": list(texts) for level, texts in sorted(self.headings.items()) if texts
        }
        entry["p"] = list(self.paragraphs)
        return entry


@dataclass(frozen=True, slots=True)
class Document:
    """A loaded page: slug, raw HTML and its structural digest."""

    slug: str
    html: str
    digest: DocumentDigest


@dataclass(frozen=True, slots=True)
class PersonRecord:
    id: str
    slug: str
    title: str
    position: str | None
    description: str
    body: str
    url: str
    image: str | None = None
    link: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class NewsRecord:
    id: str
    slug: str
    title: str
    date: str | None
    description: str
    body: str
    url: str
    image: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PublicationRecord:
    id: str
    slug: str
    title: str
    description: str
    content: str
    year: int | None
    authors: tuple[str, ...]
    url: str
    image: str | None = None
    date: str | None = None
    category: str = "publication"

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["authors"] = list(self.authors)
        return payload


ExtractedRecord = Union[PersonRecord, NewsRecord, PublicationRecord]


class SkipReason(str, Enum):
    """Why a candidate page produced no record."""

    UNCLASSIFIED = "unclassified"
    MISSING_SOURCE = "missing-source"
    REJECTED = "rejected"
    DUPLICATE_SLUG = "duplicate-slug"
    DUPLICATE_CONTENT = "duplicate-content"


@dataclass(frozen=True, slots=True)
class SkippedItem:
    slug: str
    item_type: ItemType
    reason: SkipReason

    def to_dict(self) -> dict[str, str]:
        return {"slug": self.slug, "item_type": self.item_type.value, "reason": self.reason.value}


@dataclass(slots=True)
class ExtractionResult:
    """Records gathered in one run, grouped by category, plus skipped candidates."""

    people: list[PersonRecord] = field(default_factory=list)
    news: list[NewsRecord] = field(default_factory=list)
    publications: list[PublicationRecord] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)

    def add(self, record: ExtractedRecord) -> None:
        if isinstance(record, PersonRecord):
            self.people.append(record)
        elif isinstance(record, NewsRecord):
            self.news.append(record)
        elif isinstance(record, PublicationRecord):
            self.publications.append(record)
        else:
            raise TypeError(f"Unsupported record type: {type(record).__name__}")

    def collections(self) -> dict[str, list[dict[str, Any]]]:
        """Serializable collections keyed by output name."""

        return {
            "people": [record.to_dict() for record in self.people],
            "news": [record.to_dict() for record in self.news],
            "publications": [record.to_dict() for record in self.publications],
        }

    def summary(self) -> dict[str, Any]:
        return {
            "people": len(self.people),
            "news": len(self.news),
            "publications": len(self.publications),
            "skipped": [item.to_dict() for item in self.skipped],
        }
