"""BeautifulSoup helpers for reading structure and metadata from exported pages."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from sitecms.extraction.models import DocumentDigest
from sitecms.extraction.normalization import normalize_whitespace

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_BLOCK_TAGS = _HEADING_TAGS + ["p", "li", "dt", "dd", "div", "section", "article", "blockquote", "figcaption", "td", "th"]


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def digest_from_html(html: str) -> DocumentDigest:
    """Collect heading texts per level and paragraph texts in document order."""

    soup = parse_html(html)
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    root = soup.body or soup

    headings: dict[int, list[str]] = {}
    paragraphs: list[str] = []
    for node in root.find_all(_HEADING_TAGS + ["p"]):
        text = normalize_whitespace(node.get_text(" ", strip=True))
        if not text:
            continue
        if node.name == "p":
            paragraphs.append(text)
        else:
            headings.setdefault(int(node.name[1]), []).append(text)

    return DocumentDigest(
        headings={level: tuple(texts) for level, texts in headings.items()},
        paragraphs=tuple(paragraphs),
    )


def page_title(soup: BeautifulSoup, site_name: str | None = None) -> str:
    """Return the ``<title>`` text with the trailing `` - <site name>`` removed."""

    if soup.title is None:
        return ""
    title = normalize_whitespace(soup.title.get_text())
    if site_name:
        title = title.replace(f" - {site_name}", "")
    return title.strip()


def meta_content(soup: BeautifulSoup, *, name: str | None = None, prop: str | None = None) -> str | None:
    attrs: dict[str, str] = {}
    if name is not None:
        attrs["name"] = name
    if prop is not None:
        attrs["property"] = prop

    tag = soup.find("meta", attrs=attrs)
    if not isinstance(tag, Tag):
        return None
    content = tag.get("content")
    if not isinstance(content, str):
        return None
    return content.strip() or None


def og_image(soup: BeautifulSoup) -> str | None:
    return meta_content(soup, prop="og:image")


def main_region(soup: BeautifulSoup) -> Tag | None:
    """The ``#main`` container when present, else ``<body>``."""

    main = soup.find(id="main")
    if isinstance(main, Tag):
        return main
    return soup.body


def inner_html(tag: Tag | None) -> str:
    if tag is None:
        return ""
    return tag.decode_contents()


def block_texts(tag: Tag | None) -> list[str]:
    """Text of each innermost block element under *tag*, in document order."""

    if tag is None:
        return []
    blocks = [node for node in tag.find_all(_BLOCK_TAGS) if node.find(_BLOCK_TAGS) is None]
    if not blocks:
        blocks = [tag]
    texts = (normalize_whitespace(node.get_text(" ")) for node in blocks)
    return [text for text in texts if text]
