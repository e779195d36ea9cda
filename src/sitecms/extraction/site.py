"""File access for an exported site directory."""

from __future__ import annotations

from pathlib import Path

from charset_normalizer import from_bytes

from sitecms.extraction.models import Document, DocumentDigest
from sitecms.extraction.page_parser import digest_from_html

DEFAULT_ITEMS_DIR = "pubs-news-ppl"
DEFAULT_PEOPLE_PAGE = "people.html"


class SiteDirectory:
    """Locate and decode item pages under ``<root>/<items_dir>/<slug>.html``."""

    def __init__(
        self,
        root: str | Path,
        *,
        items_dir: str = DEFAULT_ITEMS_DIR,
        people_page: str = DEFAULT_PEOPLE_PAGE,
    ) -> None:
        self._root = Path(root)
        self._items_dir = items_dir.strip("/")
        self._people_page = people_page

    @property
    def root(self) -> Path:
        return self._root

    @property
    def items_path(self) -> Path:
        return self._root / self._items_dir

    @property
    def url_prefix(self) -> str:
        """Path fragment identifying item pages in site index keys."""

        return f"/{self._items_dir}/"

    def canonical_url(self, slug: str) -> str:
        return f"{self.url_prefix}{slug}"

    def page_path(self, slug: str) -> Path:
        return self.items_path / f"{slug}.html"

    def people_page_path(self) -> Path:
        return self._root / self._people_page

    def list_slugs(self) -> list[str]:
        if not self.items_path.is_dir():
            return []
        return sorted(path.stem for path in self.items_path.glob("*.html") if path.is_file())

    def read_page(self, slug: str) -> str | None:
        path = self.page_path(slug)
        if not path.is_file():
            return None
        return read_html(path)

    def read_people_page(self) -> str | None:
        path = self.people_page_path()
        if not path.is_file():
            return None
        return read_html(path)

    def load_document(self, slug: str, digest: DocumentDigest | None = None) -> Document | None:
        """Load a page; the digest is parsed from HTML only when none is supplied."""

        html = self.read_page(slug)
        if html is None:
            return None
        return Document(slug=slug, html=html, digest=digest if digest is not None else digest_from_html(html))


def read_html(path: Path) -> str:
    raw = path.read_bytes()
    return raw.decode(detect_encoding(raw), errors="replace")


def detect_encoding(raw: bytes) -> str:
    """Prefer strict UTF-8, then fall back to charset detection."""

    try:
        raw.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    best = from_bytes(raw).best()
    if best and best.encoding:
        return best.encoding
    return "utf-8"
