from __future__ import annotations

"""Print season totals and the current hot/cold players."""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.record_store import open_record_store
from services.team_dashboard import PlayerForm, build_dashboard
from utils.exceptions import RecordStoreError
from utils.stat_format import format_ops, format_rate
from utils.tracker_config import load_config


def _form_line(form: PlayerForm) -> str:
    return f"  {form.player.display_name:<24} OPS {format_ops(form.stats.ops)}"


def main() -> int:
    parser = argparse.ArgumentParser(description="Team season summary.")
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args.config)
    try:
        dashboard = build_dashboard(open_record_store(config), config=config)
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    totals = dashboard.totals
    print(f"Games played: {dashboard.games_played}")
    print(f"AVG {format_rate(totals.avg)}  OPS {format_ops(totals.ops)}  HR {totals.hr}  RBI {totals.rbi}")
    print(f"Hot (last {config.hot_cold_window} games):")
    for form in dashboard.hot:
        print(_form_line(form))
    print(f"Cold (last {config.hot_cold_window} games):")
    for form in dashboard.cold:
        print(_form_line(form))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
