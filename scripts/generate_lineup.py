from __future__ import annotations

"""Suggest a batting order for the selected players."""

import argparse
import logging
import sys
from pathlib import Path

# Ensure repository root is on sys.path when running as a script
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.lineup_service import build_lineup
from services.record_store import open_record_store
from utils.exceptions import RecordStoreError
from utils.tracker_config import load_config


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a batting order.")
    parser.add_argument(
        "players",
        nargs="*",
        help="Player ids to include (default: every player on the roster)",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=None,
        help="Only use the last N games (default: career)",
    )
    parser.add_argument(
        "--allow-partial",
        action="store_true",
        help="Build a lineup even with fewer than the minimum number of players",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args.config)
    store = open_record_store(config)
    try:
        player_ids = args.players or [p.player_id for p in store.list_players()]
        lineup = build_lineup(
            store,
            player_ids,
            window=args.window,
            allow_partial=args.allow_partial,
            config=config,
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for slot in lineup:
        print(f"{slot.order:>2}. {slot.role_name:<10} {slot.player.display_name:<24} {slot.reason_text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
