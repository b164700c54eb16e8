"""Session state for the picker: record set, batch and current selection.

A :class:`PickerSession` is the single owner of the three pieces of state.
Every transition replaces them as a unit:

- ``load_text`` / ``load_file`` replace the record set and clear the rest.
- ``pick_one`` sets the current selection and prepends it to the batch
  unless a record with the same id is already there.
- ``generate_batch`` replaces the batch; its first entry becomes current.
- ``clear_batch`` drops batch and selection, keeping the record set.
- ``reset`` returns to the initial, nothing-loaded state.

Sampling with no records loaded is a silent no-op.
"""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

from config.settings import settings
from .export.links import unique_folder_count
from .parsing.line_parser import FileRecord, parse_listing
from .sampling.sampler import pick_batch, pick_one

logger = logging.getLogger(__name__)

EMPTY_LISTING_MESSAGE = settings.EMPTY_LISTING_MESSAGE


class ListingReadError(RuntimeError):
    """The listing text could not be obtained (unreadable file or upload)."""


class PickerSession:
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self.records: List[FileRecord] = []
        self.batch: List[FileRecord] = []
        self.current: Optional[FileRecord] = None

    @property
    def is_loaded(self) -> bool:
        return bool(self.records)

    @property
    def stats(self) -> Dict[str, int]:
        return {"files": len(self.records), "folders": unique_folder_count(self.records)}

    def load_text(self, text: str) -> List[FileRecord]:
        """Parse ``text`` and make the result the current record set.

        Returns the parsed records. When nothing parses the record set is
        still replaced (by an empty one); callers show
        ``EMPTY_LISTING_MESSAGE`` once in that case.
        """
        records = parse_listing(text)
        if not records:
            logger.warning("Listing produced no records")
        self.records = records
        self.batch = []
        self.current = None
        return records

    def load_bytes(self, data: bytes, encoding: str = "utf-8") -> List[FileRecord]:
        return self.load_text(data.decode(encoding, errors="replace"))

    def load_file(self, path: Path) -> List[FileRecord]:
        """Read a listing file and load it.

        Raises:
            ListingReadError: the file could not be read. State is unchanged.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.error("Failed to read listing %s: %s", path, exc)
            raise ListingReadError(f"Could not read listing file {path}: {exc}") from exc
        return self.load_text(text)

    def pick_one(self) -> Optional[FileRecord]:
        picked = pick_one(self.records, rng=self._rng)
        if picked is None:
            return None
        self.current = picked
        if all(rec.id != picked.id for rec in self.batch):
            self.batch = [picked] + self.batch
        return picked

    def generate_batch(self, count: Optional[int] = None) -> List[FileRecord]:
        if not self.records:
            return []
        self.batch = pick_batch(self.records, count, rng=self._rng)
        self.current = self.batch[0] if self.batch else None
        return self.batch

    def select(self, record_id: int) -> FileRecord:
        """Make the batch entry with ``record_id`` the current selection."""
        for rec in self.batch:
            if rec.id == record_id:
                self.current = rec
                return rec
        raise KeyError(f"Record {record_id} is not in the current batch")

    def clear_batch(self) -> None:
        self.batch = []
        self.current = None

    def reset(self) -> None:
        self.records = []
        self.batch = []
        self.current = None
