from __future__ import annotations

"""Record a game from a box-score CSV.

The box score has a ``player`` column (id, jersey number or name) followed by
any of the counting columns ``pa,ab,h1,h2,h3,hr,rbi,bb,so,sf,e``.
"""

import argparse
import csv
import logging
import sys
from pathlib import Path

# Ensure repository root is on sys.path when running as a script
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.stat_line import COUNTING_FIELDS
from services.game_recorder import record_game
from services.record_store import open_record_store
from utils.exceptions import RecordStoreError
from utils.tracker_config import load_config


def _read_box_score(path: Path, store) -> dict[str, dict[str, str]]:
    lookup: dict[str, str] = {}
    for player in store.list_players():
        lookup[player.player_id.lower()] = player.player_id
        lookup[player.name.lower()] = player.player_id
        if player.number:
            lookup[player.number.lower()] = player.player_id

    lines: dict[str, dict[str, str]] = {}
    with path.open("r", encoding="utf-8", newline="") as fh:
        for row in csv.DictReader(fh):
            key = (row.get("player") or "").strip().lower()
            if not key:
                continue
            player_id = lookup.get(key)
            if player_id is None:
                raise ValueError(f"Unknown player in box score: {row.get('player')!r}")
            lines[player_id] = {name: row.get(name, "") for name in COUNTING_FIELDS}
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Record a game from a box score CSV.")
    parser.add_argument("opponent", help="Opposing team")
    parser.add_argument("date", help="Game date (YYYY-MM-DD)")
    parser.add_argument("box_score", type=Path, help="Box score CSV")
    parser.add_argument("--finish", action="store_true", help="Mark the game finished")
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = load_config(args.config)
    store = open_record_store(config)
    try:
        lines = _read_box_score(args.box_score, store)
        game_id = record_game(store, args.opponent, args.date, lines, finish=args.finish)
    except (OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Recorded game {game_id} with {len(lines)} stat lines.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
