"""Link and folder helpers derived from parsed records."""
from __future__ import annotations

from typing import Iterable, Optional

from config.settings import settings
from ..parsing.line_parser import FileRecord


def build_link(handle: str, prefix: Optional[str] = None) -> Optional[str]:
    """Return ``<prefix>/<handle>`` or ``None`` for an empty handle.

    Args:
        handle: Opaque resource handle from the listing.
        prefix: Link host prefix; defaults to ``settings.LINK_PREFIX``.
    """
    if not handle:
        return None
    if prefix is None:
        prefix = settings.LINK_PREFIX
    return f"{prefix.rstrip('/')}/{handle}"


def unique_folder_count(records: Iterable[FileRecord]) -> int:
    return len({r.folder_path for r in records})
