from __future__ import annotations

import json
from pathlib import Path

import pytest

from sitecms.cli.build_index import main as build_index_main
from sitecms.cli.extract_cms import main as extract_cms_main

BIO = "Faye studies how banded mongoose pups choose which adult escort to follow."


def _write_site(site_dir: Path) -> None:
    items = site_dir / "pubs-news-ppl"
    items.mkdir(parents=True)
    (items / "faye-thompson.html").write_text(
        f"<html><body><h1>Faye Thompson</h1><p>{BIO}</p></body></html>", encoding="utf-8"
    )
    (items / "new-grant.html").write_text(
        "<html><body><h1>New grant</h1><p>Awarded in 2019 the grant runs five years.</p></body></html>",
        encoding="utf-8",
    )
    (items / "escorting.html").write_text(
        "<html><head><title>Escorting - Banded Mongoose Research Project</title></head>"
        "<body><h1>Escorting behaviour and pup growth in a cooperative mammal</h1>"
        "<h2>Gilchrist JS ‹ Otali E</h2><p>Written by Gilchrist JS &amp; Otali E.</p></body></html>",
        encoding="utf-8",
    )
    (site_dir / "people.html").write_text(
        '<html><body><script type="framer/handover">'
        + json.dumps([{"TAIvpALDu": 1, "Hohw1kgab": 2, "MY38jWI86": 3}, "faye-thompson", "Faye Thompson", "PhD Student"])
        + "</script></body></html>",
        encoding="utf-8",
    )


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SITECMS_SITE_DIR", "SITECMS_DATA_DIR", "SITECMS_ITEMS_DIR", "SITECMS_SITE_NAME", "SITECMS_MAX_TEXT_CHARS"):
        monkeypatch.delenv(name, raising=False)


def test_cli_writes_three_collections_from_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    site_dir = tmp_path / "site"
    data_dir = tmp_path / "data"
    _write_site(site_dir)

    exit_code = extract_cms_main(["--site-dir", str(site_dir), "--data-dir", str(data_dir)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["source"] == "directory"
    assert payload["people"] == 1
    assert payload["news"] == 1
    assert payload["publications"] == 1
    assert payload["skipped"] == []

    people = json.loads((data_dir / "people.json").read_text(encoding="utf-8"))
    news = json.loads((data_dir / "news.json").read_text(encoding="utf-8"))
    publications = json.loads((data_dir / "publications.json").read_text(encoding="utf-8"))

    assert people[0]["title"] == "Faye Thompson"
    assert people[0]["position"] == "PhD Student"
    assert people[0]["description"] == f"Faye Thompson {BIO}"
    assert news[0]["date"] == "2019-01-01T00:00:00.000Z"
    assert publications[0]["title"] == "Escorting"
    assert publications[0]["authors"] == ["Gilchrist JS", "Otali E"]


def test_cli_prefers_cached_index_built_by_build_index(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    site_dir = tmp_path / "site"
    data_dir = tmp_path / "data"
    _write_site(site_dir)

    assert build_index_main(["--site-dir", str(site_dir), "--output", str(data_dir / "searchIndex.json")]) == 0
    index_payload = json.loads(capsys.readouterr().out)
    assert index_payload["pages"] == 3

    index = json.loads((data_dir / "searchIndex.json").read_text(encoding="utf-8"))
    assert index["/pubs-news-ppl/faye-thompson"]["h1"] == ["Faye Thompson"]

    exit_code = extract_cms_main(["--site-dir", str(site_dir), "--data-dir", str(data_dir)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["source"] == "site-index"
    assert (payload["people"], payload["news"], payload["publications"]) == (1, 1, 1)


def test_cli_no_index_flag_ignores_cache(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    site_dir = tmp_path / "site"
    data_dir = tmp_path / "data"
    _write_site(site_dir)
    data_dir.mkdir()
    (data_dir / "searchIndex.json").write_text(json.dumps({}), encoding="utf-8")

    exit_code = extract_cms_main(["--site-dir", str(site_dir), "--data-dir", str(data_dir), "--no-index"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["source"] == "directory"
    assert payload["people"] == 1


def test_cli_fails_when_output_dir_cannot_be_created(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    exit_code = extract_cms_main(["--site-dir", str(tmp_path / "site"), "--data-dir", str(blocker / "data")])

    assert exit_code == 2
    assert capsys.readouterr().out == ""


def test_cli_with_empty_site_writes_empty_collections(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    data_dir = tmp_path / "data"

    exit_code = extract_cms_main(["--site-dir", str(tmp_path / "missing"), "--data-dir", str(data_dir)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["people"] == 0
    assert json.loads((data_dir / "people.json").read_text(encoding="utf-8")) == []
