from __future__ import annotations

"""Print one player's split table, OPS+ and percentile chart."""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.player_report import build_player_report
from services.record_store import open_record_store
from utils.exceptions import RecordStoreError
from utils.stat_format import format_index, format_ops, format_rate
from utils.tracker_config import load_config

_HEADERS = ["Split", "PA", "AB", "H", "HR", "RBI", "BB", "SO", "AVG", "OBP", "SLG", "OPS"]


def _find_player_id(store, query: str) -> str | None:
    """Match ``query`` against id, jersey number or (case-insensitive) name."""
    needle = query.strip().lower()
    for player in store.list_players():
        if needle in {player.player_id.lower(), player.number.lower(), player.name.lower()}:
            return player.player_id
    return None


def main() -> int:
    parser = argparse.ArgumentParser(description="Player stat page.")
    parser.add_argument("player", help="Player id, jersey number or name")
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args.config)
    store = open_record_store(config)
    try:
        player_id = _find_player_id(store, args.player)
        if player_id is None:
            print(f"No player matches {args.player!r}.", file=sys.stderr)
            return 1
        report = build_player_report(store, player_id, config=config)
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(report.player.display_name)
    print(f"OPS+ {format_index(report.ops_plus)}")
    print()
    print("  ".join(f"{h:>6}" if i else f"{h:<14}" for i, h in enumerate(_HEADERS)))
    for split in report.splits:
        s = split.stats
        cells = [s.pa, s.ab, s.h, s.hr, s.rbi, s.bb, s.so]
        cells += [format_rate(s.avg), format_rate(s.obp), format_rate(s.slg), format_ops(s.ops)]
        print(f"{split.label:<14}  " + "  ".join(f"{c:>6}" for c in cells))
    print()
    for metric in report.percentiles:
        print(f"{metric.label:<6} {metric.display:>6}  {metric.percentile:>3}th  {metric.band}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
