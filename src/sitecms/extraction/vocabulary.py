"""Curated allow-lists and fixed patterns that steer classification and extraction."""

from __future__ import annotations

from dataclasses import dataclass
import re

NEWS_SLUGS: frozenset[str] = frozenset(
    {
        "new-grant",
        "new-funding-from-germany",
        "pioneering-next-generation-animal-tracking",
    }
)

PEOPLE_SLUGS: frozenset[str] = frozenset(
    {
        "mike-cant",
        "field-manager",
        "assistant-professor",
        "professor",
        "hazel-nichols",
        "faye-thompson",
        "emma-vitikainen",
        "laura-labarge",
        "leela-channer",
        "graham-birch",
        "neil-jordan",
        "monil-khera",
        "nikita-bedov-panasyuk",
        "dave-seager",
        "dr-michelle-hares",
        "dr-harry-marshall",
        "beth-preston",
        "catherine-sheppard",
        "jennifer-sanderson",
        "joe-hoffman",
        "dan-franks",
        "rufus-johnstone",
        "zoe-turner",
        "olivier-carter",
        "rahul-jaitly",
        "megan-nicholl",
        "erica-sininärhi",
        "patrick-green",
    }
)

ROLE_KEYWORDS: tuple[str, ...] = (
    "professor",
    "student",
    "lecturer",
    "manager",
    "fellow",
    "director",
    "chair",
)

# Author bylines on publication pages are rendered as h2 text joined by this glyph.
AUTHOR_SEPARATOR = "‹"

BOILERPLATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"←\s*Back to Home", re.IGNORECASE),
    re.compile(r"Mongoose videos by[^\n]+", re.IGNORECASE),
    re.compile(r"\d{4} BMPR\. All rights reserved\.", re.IGNORECASE),
    re.compile(r"\b(?:About|People|Research|News|Publications|Contact)\b", re.IGNORECASE),
)


@dataclass(frozen=True, slots=True)
class ExtractionVocabulary:
    """Bundle of curated lists passed to the classifier and extractors."""

    news_slugs: frozenset[str] = NEWS_SLUGS
    people_slugs: frozenset[str] = PEOPLE_SLUGS
    role_keywords: tuple[str, ...] = ROLE_KEYWORDS
    author_separator: str = AUTHOR_SEPARATOR
    boilerplate_patterns: tuple[re.Pattern[str], ...] = BOILERPLATE_PATTERNS

    def is_role_label(self, text: str) -> bool:
        """Return True when *text* names a role rather than a person."""

        lowered = text.casefold()
        return any(keyword in lowered for keyword in self.role_keywords)


DEFAULT_VOCABULARY = ExtractionVocabulary()
