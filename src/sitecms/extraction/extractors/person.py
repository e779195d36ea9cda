"""Person pages: name and position from the people listing, text from the page."""

from __future__ import annotations

import logging

from sitecms.extraction.models import Document, ItemType, PersonRecord
from sitecms.extraction.normalization import DEFAULT_MAX_TEXT_CHARS, normalize_html, truncate_text
from sitecms.extraction.page_parser import og_image, parse_html
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.structured_data import (
    DEFAULT_PERSON_KEYS,
    PersonGraphKeys,
    StructuredGraph,
    find_person,
    load_handover_graph,
)
from sitecms.extraction.vocabulary import DEFAULT_VOCABULARY, ExtractionVocabulary

LOGGER = logging.getLogger(__name__)


_UNLOADED = object()


class PersonExtractor:
    item_type = ItemType.PERSON

    def __init__(
        self,
        site: SiteDirectory,
        *,
        vocabulary: ExtractionVocabulary = DEFAULT_VOCABULARY,
        graph: StructuredGraph | None | object = _UNLOADED,
        graph_keys: PersonGraphKeys = DEFAULT_PERSON_KEYS,
        max_text_chars: int = DEFAULT_MAX_TEXT_CHARS,
    ) -> None:
        self.site = site
        self._vocabulary = vocabulary
        self._graph = graph
        self._graph_keys = graph_keys
        self._max_text_chars = max_text_chars

    @property
    def graph(self) -> StructuredGraph | None:
        """Structured data from the people listing page, read on first use."""

        if self._graph is _UNLOADED:
            self._graph = self._load_graph()
        return self._graph  # type: ignore[return-value]

    def _load_graph(self) -> StructuredGraph | None:
        html = self.site.read_people_page()
        if html is None:
            LOGGER.info("People listing page not found at %s", self.site.people_page_path())
            return None
        return load_handover_graph(html)

    def extract(self, document: Document) -> PersonRecord:
        heading = document.digest.first_heading(1)
        name = heading
        position: str | None = None

        graph = self.graph
        if graph is not None:
            entry = find_person(graph, document.slug, self._graph_keys)
            if entry is not None:
                name = entry.name or heading
                position = entry.position

        # A heading like "Professor" labels the role; the name comes from elsewhere.
        if position is None and self._vocabulary.is_role_label(heading):
            position = heading

        text = truncate_text(
            normalize_html(document.html, self._vocabulary.boilerplate_patterns),
            self._max_text_chars,
        )
        return PersonRecord(
            id=document.slug,
            slug=document.slug,
            title=name,
            position=position,
            description=text,
            body=text,
            url=self.site.canonical_url(document.slug),
            image=og_image(parse_html(document.html)),
        )
