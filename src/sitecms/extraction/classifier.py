"""Rule-based page classifier.

The export carries no explicit type field, so the category is recovered from
weak structural signals. Rules run in a fixed order and the first one that
answers wins: curated allow-lists first, then heuristics from most to least
specific.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Sequence

from sitecms.extraction.models import DocumentDigest, ItemType
from sitecms.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

MIN_AUTHOR_HEADING_CHARS = 5
MAX_PERSON_HEADING_CHARS = 50

ClassificationRule = Callable[[str, DocumentDigest], ItemType | None]


@dataclass(frozen=True, slots=True)
class PageSignals:
    """Structural signals read from a digest."""

    h1: str
    has_author_heading: bool
    has_year: bool


def read_signals(digest: DocumentDigest, separator: str) -> PageSignals:
    has_author_heading = any(
        separator in heading and len(heading) > MIN_AUTHOR_HEADING_CHARS for heading in digest.headings_at(2)
    )
    has_year = any(YEAR_RE.search(paragraph) for paragraph in digest.paragraphs)
    return PageSignals(h1=digest.first_heading(1), has_author_heading=has_author_heading, has_year=has_year)


def build_default_rules(vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY) -> list[ClassificationRule]:
    """Return the ordered rule list bound to *vocabulary*."""

    def known_news(slug: str, digest: DocumentDigest) -> ItemType | None:
        return ItemType.NEWS if slug in vocabulary.news_slugs else None

    def known_person(slug: str, digest: DocumentDigest) -> ItemType | None:
        return ItemType.PERSON if slug in vocabulary.people_slugs else None

    def author_heading(slug: str, digest: DocumentDigest) -> ItemType | None:
        signals = read_signals(digest, vocabulary.author_separator)
        return ItemType.PUBLICATION if signals.has_author_heading else None

    def dated_without_authors(slug: str, digest: DocumentDigest) -> ItemType | None:
        signals = read_signals(digest, vocabulary.author_separator)
        if signals.has_year and not signals.has_author_heading:
            return ItemType.NEWS
        return None

    def short_heading(slug: str, digest: DocumentDigest) -> ItemType | None:
        signals = read_signals(digest, vocabulary.author_separator)
        if len(signals.h1) < MAX_PERSON_HEADING_CHARS and not signals.has_year and not signals.has_author_heading:
            return ItemType.PERSON
        return None

    return [known_news, known_person, author_heading, dated_without_authors, short_heading]


class ItemClassifier:
    """Assign exactly one :class:`ItemType` to each page."""

    def __init__(self, rules: Sequence[ClassificationRule] | None = None) -> None:
        self._rules = list(rules) if rules is not None else build_default_rules()

    @classmethod
    def from_vocabulary(cls, vocabulary: ExtractionVocabulary) -> "ItemClassifier":
        return cls(build_default_rules(vocabulary))

    def classify(self, slug: str, digest: DocumentDigest) -> ItemType:
        for rule in self._rules:
            verdict = rule(slug, digest)
            if verdict is not None:
                return verdict
        return ItemType.UNKNOWN


def classify(slug: str, digest: DocumentDigest, vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY) -> ItemType:
    """Classify one page with the default rule order."""

    return ItemClassifier.from_vocabulary(vocabulary).classify(slug, digest)
