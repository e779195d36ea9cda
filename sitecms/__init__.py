"""Expose the src-layout ``sitecms`` package when running ``python -m`` from the repo root."""

from __future__ import annotations

from pathlib import Path

_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "sitecms"

if _SRC_PACKAGE.is_dir():
    __path__.append(str(_SRC_PACKAGE))
