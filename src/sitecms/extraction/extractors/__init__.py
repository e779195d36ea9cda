"""Per-category record extractors."""

from __future__ import annotations

from sitecms.extraction.models import ItemType
from sitecms.extraction.normalization import DEFAULT_MAX_TEXT_CHARS
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary

from .base import RecordExtractor
from .news import NewsExtractor
from .person import PersonExtractor
from .publication import DEFAULT_SITE_NAME, PublicationExtractor


def build_default_extractors(
    site: SiteDirectory,
    *,
    vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
    site_name: str = DEFAULT_SITE_NAME,
    max_text_chars: int = DEFAULT_MAX_TEXT_CHARS,
) -> dict[ItemType, RecordExtractor]:
    """Return the default extractor for every extractable category."""

    return {
        ItemType.PERSON: PersonExtractor(site, vocabulary=vocabulary, max_text_chars=max_text_chars),
        ItemType.NEWS: NewsExtractor(site, vocabulary=vocabulary, max_text_chars=max_text_chars),
        ItemType.PUBLICATION: PublicationExtractor(
            site,
            vocabulary=vocabulary,
            site_name=site_name,
            max_text_chars=max_text_chars,
        ),
    }


__all__ = [
    "RecordExtractor",
    "PersonExtractor",
    "NewsExtractor",
    "PublicationExtractor",
    "build_default_extractors",
]
