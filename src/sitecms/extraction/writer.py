"""Persist extracted collections as pretty-printed JSON arrays."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from sitecms.extraction.models import ExtractionResult


@dataclass(slots=True)
class CollectionWriteError(Exception):
    """The output location could not be prepared or written."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


def ensure_output_dir(data_dir: Path) -> None:
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CollectionWriteError(data_dir, f"Failed to create output directory: {exc}") from exc


def write_collections(data_dir: Path, result: ExtractionResult) -> dict[str, Path]:
    """Write ``people.json``, ``news.json`` and ``publications.json`` into *data_dir*."""

    ensure_output_dir(data_dir)
    written: dict[str, Path] = {}
    for name, records in result.collections().items():
        path = data_dir / f"{name}.json"
        try:
            path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise CollectionWriteError(path, f"Failed to write collection: {exc}") from exc
        written[name] = path
    return written
