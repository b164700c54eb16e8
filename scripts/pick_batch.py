"""Draw a random batch from a saved listing and write it out.

Example:
    python scripts/pick_batch.py listing.txt --count 20 --csv
    python scripts/pick_batch.py listing.txt --seed 7 --out data/exports/today.txt

The listing is the text copied from a ``megacmd`` session (lines like
``/path/to/file.jpg <H:handle>``). Exit codes: 0 on success, 1 when the
listing has no usable entries, 2 when it cannot be read.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from datetime import date
from pathlib import Path

# Ensure project root is on sys.path so `from megapick...` imports work when
# this script is run directly from a checkout.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.logging_config import configure_logging
from config.settings import settings
from megapick.export.report import export_filename, format_batch_text, write_batch_csv, write_batch_text
from megapick.session import EMPTY_LISTING_MESSAGE, ListingReadError, PickerSession

logger = logging.getLogger("pick_batch")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Pick random files from a pasted cloud-storage listing")
    p.add_argument("listing", help="Path to the listing text file")
    p.add_argument("--count", "-n", type=int, default=settings.DEFAULT_BATCH_SIZE, help="Batch size")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible draw")
    p.add_argument("--out", default=None, help="Text export path (default: EXPORT_DIR/random-files-<date>.txt)")
    p.add_argument("--csv", action="store_true", help="Also write a CSV export next to the text export")
    p.add_argument("--stdout", action="store_true", help="Print the listing instead of writing files")
    p.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(debug=args.debug)

    rng = random.Random(args.seed) if args.seed is not None else None
    session = PickerSession(rng=rng)
    try:
        records = session.load_file(Path(args.listing))
    except ListingReadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    if not records:
        print(EMPTY_LISTING_MESSAGE, file=sys.stderr)
        return 1

    stats = session.stats
    logger.info("Loaded %d files across %d folders", stats["files"], stats["folders"])
    batch = session.generate_batch(args.count)

    if args.stdout:
        print(format_batch_text(batch))
        return 0

    out = Path(args.out) if args.out else Path(settings.EXPORT_DIR) / export_filename(date.today(), "txt")
    write_batch_text(out, batch)
    print(f"Wrote {len(batch)} files to {out}")
    if args.csv:
        csv_out = out.with_suffix(".csv")
        write_batch_csv(csv_out, batch)
        print(f"Wrote CSV export to {csv_out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
