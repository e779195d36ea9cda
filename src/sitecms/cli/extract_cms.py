"""CLI command that turns an exported site into CMS collections."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from sitecms.config import DEFAULT_INDEX_FILE, ExtractionSettings
from sitecms.extraction.classifier import ItemClassifier
from sitecms.extraction.extractors import build_default_extractors
from sitecms.extraction.orchestrator import ExtractionOrchestrator
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.site_index import SiteIndex
from sitecms.extraction.writer import CollectionWriteError, ensure_output_dir, write_collections

load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract people, news and publications from an exported site")
    parser.add_argument("--site-dir", default=None, help="Exported site root (default: $SITECMS_SITE_DIR or ./site)")
    parser.add_argument("--data-dir", default=None, help="Output directory (default: $SITECMS_DATA_DIR or ./data)")
    parser.add_argument("--index-file", default=None, help="Cached site index (default: <data-dir>/searchIndex.json)")
    parser.add_argument(
        "--no-index",
        action="store_true",
        help="Ignore any cached site index and read every page from the items directory",
    )
    return parser.parse_args(argv)


def _build_orchestrator(settings: ExtractionSettings, site: SiteDirectory) -> ExtractionOrchestrator:
    orchestrator = ExtractionOrchestrator(site, ItemClassifier())
    extractors = build_default_extractors(
        site,
        site_name=settings.site_name,
        max_text_chars=settings.max_text_chars,
    )
    for item_type, extractor in extractors.items():
        orchestrator.register_extractor(item_type, extractor)
    return orchestrator


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    args = _parse_args(argv)

    try:
        settings = ExtractionSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    site_dir = Path(args.site_dir) if args.site_dir else settings.site_dir
    data_dir = Path(args.data_dir) if args.data_dir else settings.data_dir
    index_path = Path(args.index_file) if args.index_file else data_dir / DEFAULT_INDEX_FILE

    try:
        ensure_output_dir(data_dir)
    except CollectionWriteError as exc:
        LOGGER.error("Cannot continue: %s", exc)
        return 2

    site = SiteDirectory(site_dir, items_dir=settings.items_dir)
    index = None if args.no_index else SiteIndex.load(index_path)
    if index is None:
        LOGGER.info("Enumerating pages from %s", site.items_path)
    else:
        LOGGER.info("Enumerating %d pages from site index %s", len(index), index_path)

    result = _build_orchestrator(settings, site).run(index)

    try:
        written = write_collections(data_dir, result)
    except CollectionWriteError as exc:
        LOGGER.error("Cannot continue: %s", exc)
        return 2

    for path in written.values():
        LOGGER.info("Wrote %s", path)

    payload = {
        "site_dir": str(site_dir),
        "data_dir": str(data_dir),
        "source": "directory" if index is None else "site-index",
        **result.summary(),
        "outputs": {name: str(path) for name, path in written.items()},
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
