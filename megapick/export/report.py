"""Batch exports: the plain-text listing and the CSV table.

The text format mirrors what users paste into notes or chat::

    Random Files - 2026-10-18 14:03:11

    1. clip1.mp4
       Path: /videos/trip/clip1.mp4
       Link: https://mega.nz/file/AbCd1234XyZ

    2. ...

The CSV export carries the full record plus its link, built through pandas so
it can be previewed in the app with ``st.dataframe``.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from ..parsing.line_parser import FileRecord
from ..utils.atomic_write import atomic_write_csv, atomic_write_text
from .links import build_link

logger = logging.getLogger(__name__)

EXPORT_COLUMNS: List[str] = [
    "index",
    "file_name",
    "full_path",
    "folder_path",
    "extension",
    "category",
    "handle",
    "link",
]


def export_filename(day: Optional[date] = None, suffix: str = "txt") -> str:
    day = day or date.today()
    return f"random-files-{day.isoformat()}.{suffix}"


def format_batch_text(batch: Sequence[FileRecord], timestamp: Optional[str] = None) -> str:
    """Render the batch as the numbered text listing.

    Args:
        batch: Records in display order.
        timestamp: Header label; defaults to the current local time.

    Returns:
        The listing, or ``""`` when the batch is empty.
    """
    if not batch:
        return ""
    if timestamp is None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    entries = []
    for index, rec in enumerate(batch, start=1):
        entries.append(
            f"{index}. {rec.file_name}\n"
            f"   Path: {rec.full_path}\n"
            f"   Link: {build_link(rec.handle) or ''}\n"
        )
    return f"Random Files - {timestamp}\n\n" + "\n".join(entries)


def batch_to_frame(batch: Sequence[FileRecord]) -> pd.DataFrame:
    rows = []
    for index, rec in enumerate(batch, start=1):
        row = rec.to_dict()
        row.pop("id")
        row["index"] = index
        row["link"] = build_link(rec.handle)
        rows.append(row)
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def write_batch_text(path: Path, batch: Sequence[FileRecord], timestamp: Optional[str] = None) -> Path:
    path = Path(path)
    atomic_write_text(path, format_batch_text(batch, timestamp))
    logger.info("Wrote text export of %d files to %s", len(batch), path)
    return path


def write_batch_csv(path: Path, batch: Sequence[FileRecord]) -> Path:
    path = Path(path)
    atomic_write_csv(path, batch_to_frame(batch))
    logger.info("Wrote CSV export of %d files to %s", len(batch), path)
    return path
