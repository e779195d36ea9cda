"""Plain-text normalization for exported HTML pages."""

from __future__ import annotations

import re
from typing import Iterable

from sitecms.extraction.vocabulary import BOILERPLATE_PATTERNS

MIN_SENTENCE_CHARS = 50
DEFAULT_MAX_TEXT_CHARS = 5000

_WHITESPACE_RE = re.compile(r"\s+")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_BODY_RE = re.compile(r"<body[^>]*>(.+?)</body>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_scripts_and_styles(html: str) -> str:
    return _SCRIPT_STYLE_RE.sub("", html)


def html_body_text(html: str, boilerplate: Iterable[re.Pattern[str]] = BOILERPLATE_PATTERNS) -> str:
    """Return the flat text of the ``<body>`` region with boilerplate removed.

    Returns an empty string when the document has no body element.
    """

    match = _BODY_RE.search(strip_scripts_and_styles(html))
    if match is None:
        return ""

    body = match.group(1)
    for pattern in boilerplate:
        body = pattern.sub("", body)
    return normalize_whitespace(_TAG_RE.sub(" ", body))


def meaningful_sentences(text: str, *, min_chars: int = MIN_SENTENCE_CHARS) -> str:
    """Keep sentences with at least *min_chars* characters before the terminator.

    Shorter fragments are dropped; they are almost always menu labels or
    button captions. The result is stable under repeated application.
    """

    kept: list[str] = []
    for match in _SENTENCE_RE.finditer(normalize_whitespace(text)):
        sentence = match.group(0).strip()
        if len(sentence) - 1 >= min_chars:
            kept.append(sentence)
    return " ".join(kept)


def normalize_html(html: str, boilerplate: Iterable[re.Pattern[str]] = BOILERPLATE_PATTERNS) -> str:
    """Reduce a raw HTML page to its meaningful plain-text sentences."""

    return meaningful_sentences(html_body_text(html, boilerplate))


def truncate_text(text: str, limit: int) -> str:
    """Return the exact *limit*-character prefix of *text* (no ellipsis)."""

    if limit < 0:
        raise ValueError("limit must be >= 0")
    return text[:limit]
