from __future__ import annotations

"""Delete every player, game and stat line.  Requires the admin password."""

import argparse
import getpass
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.admin_gate import open_guarded_store
from utils.exceptions import AuthorizationError, RecordStoreError
from utils.tracker_config import load_config


def main() -> int:
    parser = argparse.ArgumentParser(description="Clear all tracker data.")
    parser.add_argument(
        "--password",
        default=None,
        help="Admin password (prompted for when omitted)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config overrides JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    password = args.password
    if password is None:
        password = getpass.getpass("Admin password: ")
    try:
        open_guarded_store(load_config(args.config)).clear_all(password=password)
    except AuthorizationError as exc:
        print(str(exc), file=sys.stderr)
        return 3
    except RecordStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("All players, games and stats deleted.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
