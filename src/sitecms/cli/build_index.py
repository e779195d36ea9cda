"""CLI command that caches a site index built from the exported HTML pages."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from sitecms.config import ExtractionSettings
from sitecms.extraction.site import SiteDirectory
from sitecms.extraction.site_index import SiteIndex

load_dotenv()

LOGGER = logging.getLogger(__name__)


def build_site_index(site: SiteDirectory) -> SiteIndex:
    entries = {}
    for slug in site.list_slugs():
        document = site.load_document(slug)
        if document is None:
            continue
        entries[site.canonical_url(slug)] = document.digest
    return SiteIndex(entries=entries)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    parser = argparse.ArgumentParser(description="Build the cached site index from exported HTML pages")
    parser.add_argument("--site-dir", default=None, help="Exported site root (default: $SITECMS_SITE_DIR or ./site)")
    parser.add_argument("--output", default=None, help="Index file to write (default: <data-dir>/searchIndex.json)")
    args = parser.parse_args(argv)

    try:
        settings = ExtractionSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    site = SiteDirectory(Path(args.site_dir) if args.site_dir else settings.site_dir, items_dir=settings.items_dir)
    output = Path(args.output) if args.output else settings.index_path

    index = build_site_index(site)
    try:
        index.save(output)
    except OSError as exc:
        LOGGER.error("Failed to write site index %s: %s", output, exc)
        return 2

    LOGGER.info("Indexed %d pages from %s", len(index), site.items_path)
    print(json.dumps({"site_dir": str(site.root), "output": str(output), "pages": len(index)}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
