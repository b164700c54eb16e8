"""Random draws over a parsed record set.

``pick_one`` samples with replacement across calls; ``pick_batch`` draws a set
of distinct records by rejection sampling (draw, skip if already chosen,
repeat). Inputs are whatever fits in a paste buffer, so the expected number of
draws stays small; the loop always terminates because the target size never
exceeds the number of records.

Both functions accept an optional ``random.Random`` so callers and tests can
make draws reproducible.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Set

from config.settings import settings
from ..parsing.line_parser import FileRecord

logger = logging.getLogger(__name__)


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def pick_one(records: Sequence[FileRecord], rng: Optional[random.Random] = None) -> Optional[FileRecord]:
    if not records:
        return None
    return records[_rng(rng).randrange(len(records))]


def pick_batch(
    records: Sequence[FileRecord],
    count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[FileRecord]:
    """Draw up to ``count`` records, distinct by ``id``, uniformly at random.

    Args:
        records: The record set to draw from.
        count: Target batch size; ``settings.DEFAULT_BATCH_SIZE`` when omitted.
        rng: Optional random source.

    Returns:
        The drawn records in draw order. Empty when ``records`` is empty or
        ``count`` is not positive.
    """
    if count is None:
        count = settings.DEFAULT_BATCH_SIZE
    if not records or count <= 0:
        return []

    r = _rng(rng)
    # distinct ids, so a hand-built list with repeated ids still terminates
    limit = min(count, len({rec.id for rec in records}))
    batch: List[FileRecord] = []
    used: Set[int] = set()
    draws = 0
    while len(batch) < limit:
        draws += 1
        candidate = records[r.randrange(len(records))]
        if candidate.id in used:
            continue
        used.add(candidate.id)
        batch.append(candidate)

    logger.debug("Drew batch of %d from %d records in %d draws", limit, len(records), draws)
    return batch
