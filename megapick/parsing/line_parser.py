"""Listing parser for pasted ``megacmd`` output.

Turns heterogeneous terminal text into an ordered list of :class:`FileRecord`.
Only lines containing the handle marker (``<H:``) are considered; prompts,
banners and blank lines are skipped silently. A candidate line has the shape::

    /videos/trip/clip1.mp4   <H:AbCd1234XyZ>

i.e. a path, at least one whitespace character, and a trailing ``<H:...>``
token that ends the line. The token is located with an explicit scan instead
of a backtracking regex; the result is the same as matching
``^(.+?)\\s+<H:([^>]+)>$`` against the stripped line.

Parsing never raises on malformed input: unmatched lines are dropped and an
empty listing simply yields an empty list.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from config.settings import settings
from .categories import classify

logger = logging.getLogger(__name__)

MARKER = settings.HANDLE_MARKER


@dataclass(frozen=True)
class FileRecord:
    id: int
    file_name: str
    full_path: str
    folder_path: str
    extension: str
    category: str
    handle: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def extension_of(file_name: str) -> str:
    """Return the lowercased text after the final ``.`` or ``""`` if none."""
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1].lower()


def split_handle_token(line: str) -> Optional[Tuple[str, str]]:
    """Split a listing line into ``(path, handle)``.

    The stripped line must end with ``>``. Since the handle cannot contain
    ``>``, the handle token has to start after the last inner ``>``. Among the
    marker positions in that tail, the earliest one preceded by whitespace
    wins, which keeps the path as short as possible.

    Args:
        line: One raw line of the listing.

    Returns:
        ``(path, handle)`` with surrounding whitespace removed, or ``None``
        when the line does not have the expected shape.
    """
    trimmed = line.strip()
    if not trimmed.endswith(">"):
        return None
    end = len(trimmed) - 1
    floor = trimmed.rfind(">", 0, end) + 1

    idx = trimmed.find(MARKER, floor)
    while idx != -1:
        handle_start = idx + len(MARKER)
        # trimmed[0] is never whitespace, so a whitespace char at idx - 1
        # guarantees a non-empty path before it
        if idx > 0 and trimmed[idx - 1].isspace() and handle_start < end:
            path = trimmed[:idx].strip()
            handle = trimmed[handle_start:end].strip()
            return path, handle
        idx = trimmed.find(MARKER, idx + 1)
    return None


def build_record(record_id: int, path: str, handle: str) -> Optional[FileRecord]:
    """Build a record from a path and handle.

    Returns ``None`` when the path has no non-empty ``/`` segments.
    """
    segments = [s for s in path.split("/") if s]
    if not segments:
        return None
    file_name = segments[-1]
    folder_path = "/" + "/".join(segments[:-1]) if len(segments) > 1 else "/"
    extension = extension_of(file_name)
    return FileRecord(
        id=record_id,
        file_name=file_name,
        full_path="/" + "/".join(segments),
        folder_path=folder_path,
        extension=extension,
        category=classify(extension),
        handle=handle,
    )


def parse_line(line: str, record_id: int) -> Optional[FileRecord]:
    if MARKER not in line:
        return None
    parts = split_handle_token(line)
    if parts is None:
        return None
    return build_record(record_id, *parts)


def parse_listing(text: str) -> List[FileRecord]:
    """Parse a pasted listing into records.

    Args:
        text: Raw multi-line text, possibly mixed with prompts and other noise.

    Returns:
        Records in input order. ``id`` is the position in the returned list,
        so skipped lines do not consume ids.
    """
    records: List[FileRecord] = []
    if not text:
        return records

    lines = text.split("\n")
    candidates = 0
    for lineno, line in enumerate(lines, start=1):
        if MARKER not in line:
            continue
        candidates += 1
        record = parse_line(line, len(records))
        if record is None:
            logger.debug("Skipping unparseable line %d: %r", lineno, line[:200])
            continue
        records.append(record)

    logger.info(
        "Parsed %d records from %d candidate lines (%d lines scanned)",
        len(records), candidates, len(lines),
    )
    return records
