from __future__ import annotations

"""Print a bcrypt hash for ``admin_password_hash`` / ``TS_ADMIN_PASSWORD_HASH``."""

import argparse
import getpass
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.admin_gate import hash_password


def main() -> int:
    parser = argparse.ArgumentParser(description="Hash an admin password.")
    parser.add_argument("--password", default=None, help="Password (prompted for when omitted)")
    args = parser.parse_args()
    password = args.password or getpass.getpass("New admin password: ")
    if not password:
        print("Password must not be empty.", file=sys.stderr)
        return 2
    print(hash_password(password))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
