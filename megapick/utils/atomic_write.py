"""Atomic write helpers for batch exports.

Exports are written to a temporary file in the target directory and moved
into place with os.replace, so a reader never sees a half-written export.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, IO

import pandas as pd


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _atomic_write(path: Path, write: Callable[[IO[str]], None], encoding: str = "utf-8") -> None:
    path = Path(path)
    _ensure_parent(path)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", text=True)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            write(fh)
        os.replace(tmp, str(path))
    finally:
        # only left behind when write() or replace failed
        if os.path.exists(tmp):
            os.remove(tmp)


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    _atomic_write(path, lambda fh: fh.write(text), encoding=encoding)


def atomic_write_csv(path: Path, df: pd.DataFrame) -> None:
    """Write a DataFrame to CSV atomically (no index column)."""
    _atomic_write(path, lambda fh: df.to_csv(fh, index=False))
