from __future__ import annotations

import json
from pathlib import Path

from sitecms.extraction.models import DocumentDigest
from sitecms.extraction.page_parser import block_texts, digest_from_html, main_region, parse_html
from sitecms.extraction.site import SiteDirectory, read_html
from sitecms.extraction.site_index import SiteIndex, slug_from_url


def test_digest_from_html_groups_headings_and_paragraphs() -> None:
    html = """
    <html><head><title>T</title><script>var p = "<p>hidden</p>";</script></head>
    <body>
      <h1>Mike  Cant</h1>
      <h2>First</h2><p>One</p>
      <h2>Second</h2><p>  </p><p>Two <b>bold</b></p>
    </body></html>
    """

    digest = digest_from_html(html)

    assert digest.headings_at(1) == ("Mike Cant",)
    assert digest.headings_at(2) == ("First", "Second")
    assert digest.paragraphs == ("One", "Two bold")
    assert digest.first_heading(3) == ""


def test_block_texts_yields_innermost_blocks_in_order() -> None:
    soup = parse_html(
        "<html><body><div id='main'><section><p>By <a>Ann</a> Lee</p><ul><li>One</li><li> </li></ul></section>"
        "<p>Last</p></div></body></html>"
    )

    assert block_texts(main_region(soup)) == ["By Ann Lee", "One", "Last"]
    assert block_texts(parse_html("<html><body><span>Loose text</span></body></html>").body) == ["Loose text"]
    assert block_texts(None) == []


def test_digest_round_trips_through_index_entry() -> None:
    entry = {"h1": ["Title"], "h2": ["A ‹ B"], "p": ["Para"], "title": "ignored"}

    digest = DocumentDigest.from_index_entry(entry)

    assert digest.first_heading(1) == "Title"
    assert digest.to_index_entry() == {"h1": ["Title"], "h2": ["A ‹ B"], "p": ["Para"]}


def test_site_index_load_and_save(tmp_path: Path) -> None:
    path = tmp_path / "data" / "searchIndex.json"
    index = SiteIndex.from_mapping({"/pubs-news-ppl/mike-cant": {"h1": ["Mike Cant"], "p": []}})

    index.save(path)
    loaded = SiteIndex.load(path)

    assert loaded is not None
    assert list(loaded.items_under("/pubs-news-ppl/")) == [
        ("mike-cant", DocumentDigest.from_index_entry({"h1": ["Mike Cant"], "p": []}))
    ]


def test_site_index_load_tolerates_missing_or_broken_files(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text(json.dumps([1, 2]), encoding="utf-8")

    assert SiteIndex.load(tmp_path / "absent.json") is None
    assert SiteIndex.load(broken) is None
    assert SiteIndex.load(listing) is None


def test_slug_from_url_strips_prefix_and_extension() -> None:
    assert slug_from_url("/pubs-news-ppl/new-grant.html", "/pubs-news-ppl/") == "new-grant"
    assert slug_from_url("/pubs-news-ppl/new-grant", "/pubs-news-ppl/") == "new-grant"


def test_site_directory_lists_and_locates_pages(tmp_path: Path) -> None:
    items = tmp_path / "pubs-news-ppl"
    items.mkdir()
    (items / "b.html").write_text("<html><body><h1>B</h1></body></html>", encoding="utf-8")
    (items / "a.html").write_text("<html><body><h1>A</h1></body></html>", encoding="utf-8")
    (items / "notes.txt").write_text("ignored", encoding="utf-8")
    site = SiteDirectory(tmp_path)

    assert site.list_slugs() == ["a", "b"]
    assert site.page_path("c") == items / "c.html"
    assert site.read_page("c") is None
    assert site.canonical_url("a") == "/pubs-news-ppl/a"

    document = site.load_document("a")
    assert document is not None
    assert document.digest.first_heading(1) == "A"


def test_site_directory_without_items_dir_is_empty(tmp_path: Path) -> None:
    assert SiteDirectory(tmp_path / "nowhere").list_slugs() == []


def test_read_html_decodes_legacy_encodings(tmp_path: Path) -> None:
    page = tmp_path / "legacy.html"
    text = "<html><body><p>Erica Sininärhi studied mongoose vocal communication in Mweya for her doctorate.</p></body></html>"
    page.write_bytes(text.encode("cp1252"))

    decoded = read_html(page)

    assert "Sinin" in decoded
    assert "Mweya" in decoded
