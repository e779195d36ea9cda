"""News pages: allow-listed items dated from the first year mentioned."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from sitecms.extraction.classifier import YEAR_RE
from sitecms.extraction.models import Document, ItemType, NewsRecord
from sitecms.extraction.normalization import DEFAULT_MAX_TEXT_CHARS, normalize_html, truncate_text
from sitecms.extraction.page_parser import og_image, parse_html
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary


def date_from_paragraphs(paragraphs: Iterable[str]) -> str | None:
    """January 1st (UTC) of the first year token found, scanning in order."""

    for paragraph in paragraphs:
        match = YEAR_RE.search(paragraph)
        if match:
            moment = datetime(int(match.group(0)), 1, 1, tzinfo=timezone.utc)
            return moment.strftime("%Y-%m-%dT%H:%M:%S.000Z")
    return None


class NewsExtractor:
    item_type = ItemType.NEWS

    def __init__(
        self,
        site: SiteDirectory,
        *,
        vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
        max_text_chars: int = DEFAULT_MAX_TEXT_CHARS,
    ) -> None:
        self.site = site
        self._vocabulary = vocabulary
        self._max_text_chars = max_text_chars

    def extract(self, document: Document) -> NewsRecord | None:
        if document.slug not in self._vocabulary.news_slugs:
            return None

        text = truncate_text(
            normalize_html(document.html, self._vocabulary.boilerplate_patterns),
            self._max_text_chars,
        )
        return NewsRecord(
            id=document.slug,
            slug=document.slug,
            title=document.digest.first_heading(1),
            date=date_from_paragraphs(document.digest.paragraphs),
            description=text,
            body=text,
            url=self.site.canonical_url(document.slug),
            image=og_image(parse_html(document.html)),
        )
