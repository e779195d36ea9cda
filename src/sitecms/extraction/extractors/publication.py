"""Publication pages: title, year and a best-effort author list."""

from __future__ import annotations

import re

from sitecms.extraction.classifier import YEAR_RE
from sitecms.extraction.models import Document, ItemType, PublicationRecord
from sitecms.extraction.normalization import DEFAULT_MAX_TEXT_CHARS, normalize_whitespace, truncate_text
from sitecms.extraction.page_parser import block_texts, inner_html, main_region, meta_content, og_image, page_title, parse_html
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary

DEFAULT_SITE_NAME = "Banded Mongoose Research Project"

_AUTHOR_RE = re.compile(r"\b(?:written by|by|authors?)[:\s]+([^.]+)", re.IGNORECASE)
_AUTHOR_SPLIT_RE = re.compile(r"[,&]")


def year_from_title(title: str) -> int | None:
    match = YEAR_RE.search(title)
    return int(match.group(0)) if match else None


def parse_authors(text: str) -> list[str]:
    """Names following "by", "author(s)" or "written by", split on commas and ampersands."""

    match = _AUTHOR_RE.search(text)
    if match is None:
        return []
    names = (normalize_whitespace(part) for part in _AUTHOR_SPLIT_RE.split(match.group(1)))
    return [name for name in names if name]


class PublicationExtractor:
    item_type = ItemType.PUBLICATION

    def __init__(
        self,
        site: SiteDirectory,
        *,
        vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
        site_name: str = DEFAULT_SITE_NAME,
        max_text_chars: int = DEFAULT_MAX_TEXT_CHARS,
    ) -> None:
        self.site = site
        self._vocabulary = vocabulary
        self._site_name = site_name
        self._max_text_chars = max_text_chars

    def extract(self, document: Document) -> PublicationRecord:
        soup = parse_html(document.html)
        for tag in soup(["script", "style", "noscript"]):
            tag.decompose()

        title = page_title(soup, self._site_name)
        region = main_region(soup)

        return PublicationRecord(
            id=document.slug,
            slug=document.slug,
            title=title,
            description=meta_content(soup, name="description") or "",
            content=truncate_text(inner_html(region), self._max_text_chars),
            year=year_from_title(title),
            authors=tuple(self._authors(block_texts(region))),
            url=self.site.canonical_url(document.slug),
            image=og_image(soup),
        )

    def _authors(self, blocks: list[str]) -> list[str]:
        # One block at a time so a byline never runs into the following paragraph.
        for text in blocks:
            for pattern in self._vocabulary.boilerplate_patterns:
                text = pattern.sub("", text)
            authors = parse_authors(normalize_whitespace(text))
            if authors:
                return authors
        return []
