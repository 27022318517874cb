from __future__ import annotations

"""Import season totals from the legacy stats spreadsheet (CSV export)."""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.legacy_import import import_legacy_csv
from services.record_store import open_record_store
from utils.exceptions import LegacyImportError, RecordStoreError
from utils.tracker_config import load_config


def main() -> int:
    parser = argparse.ArgumentParser(description="Import a legacy stats CSV.")
    parser.add_argument("csv_path", type=Path, help="Legacy stats CSV")
    parser.add_argument("--date", default=None, help="Date for the import game (default: today)")
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = load_config(args.config)
    try:
        summary = import_legacy_csv(open_record_store(config), args.csv_path, import_date=args.date)
    except (OSError, LegacyImportError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(
        f"Imported {len(summary.imported)} players into game {summary.game_id} "
        f"({summary.skipped} rows skipped)."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
