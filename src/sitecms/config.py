"""Runtime configuration for extraction runs."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from sitecms.extraction.extractors.publication import DEFAULT_SITE_NAME
from sitecms.extraction.normalization import DEFAULT_MAX_TEXT_CHARS
from sitecms.extraction.site import DEFAULT_ITEMS_DIR


DEFAULT_SITE_DIR = "site"
DEFAULT_DATA_DIR = "data"
DEFAULT_INDEX_FILE = "searchIndex.json"


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    value = int(raw_value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Validated locations and limits for one extraction run."""

    site_dir: Path
    data_dir: Path
    items_dir: str = DEFAULT_ITEMS_DIR
    site_name: str = DEFAULT_SITE_NAME
    max_text_chars: int = DEFAULT_MAX_TEXT_CHARS

    @property
    def index_path(self) -> Path:
        return self.data_dir / DEFAULT_INDEX_FILE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        site_dir_raw = source.get("SITECMS_SITE_DIR", DEFAULT_SITE_DIR).strip()
        data_dir_raw = source.get("SITECMS_DATA_DIR", DEFAULT_DATA_DIR).strip()
        items_dir_raw = source.get("SITECMS_ITEMS_DIR", DEFAULT_ITEMS_DIR).strip().strip("/")
        site_name_raw = source.get("SITECMS_SITE_NAME", DEFAULT_SITE_NAME).strip()
        max_chars_raw = source.get("SITECMS_MAX_TEXT_CHARS", str(DEFAULT_MAX_TEXT_CHARS)).strip()

        if not site_dir_raw:
            raise ValueError("SITECMS_SITE_DIR cannot be empty")
        if not data_dir_raw:
            raise ValueError("SITECMS_DATA_DIR cannot be empty")
        if not items_dir_raw:
            raise ValueError("SITECMS_ITEMS_DIR cannot be empty")
        if not site_name_raw:
            raise ValueError("SITECMS_SITE_NAME cannot be empty")
        if not max_chars_raw:
            raise ValueError("SITECMS_MAX_TEXT_CHARS cannot be empty")

        max_text_chars = _parse_positive_int(
            name="SITECMS_MAX_TEXT_CHARS",
            raw_value=max_chars_raw,
            minimum=1,
        )

        return cls(
            site_dir=Path(site_dir_raw),
            data_dir=Path(data_dir_raw),
            items_dir=items_dir_raw,
            site_name=site_name_raw,
            max_text_chars=max_text_chars,
        )
