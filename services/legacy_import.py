from __future__ import annotations

"""Import season totals kept in the old spreadsheet.

The sheet has one row per player (``Number,Name,PA,AB,AVG,...,1B,2B,3B,HR,
RBI,BB,SO,SF,...``) and a closing ``TEAM`` row.  Rate columns are ignored and
recomputed from the counts.  All rows land in a single synthetic game so the
career totals line up with the sheet.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from datetime import date as _date
from pathlib import Path
from typing import Any, Dict, List, Optional

from utils.exceptions import LegacyImportError

_LOGGER = logging.getLogger(__name__)

LEGACY_GAME_OPPONENT = "Legacy Stats Import"

# sheet column -> stat line field
LEGACY_COLUMNS: Dict[str, str] = {
    "PA": "pa",
    "AB": "ab",
    "1B": "h1",
    "2B": "h2",
    "3B": "h3",
    "HR": "hr",
    "RBI": "rbi",
    "BB": "bb",
    "SO": "so",
    "SF": "sf",
}

_TOTAL_ROW_NAMES = {"TEAM"}


@dataclass
class ImportSummary:
    game_id: str
    imported: List[str] = field(default_factory=list)
    skipped: int = 0


def _as_int(raw: Optional[str]) -> int:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return 0


def import_legacy_rows(
    store: Any, text: str, *, import_date: Optional[str] = None
) -> ImportSummary:
    """Import the legacy sheet given as CSV ``text`` into ``store``."""

    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    header = [h.strip() for h in (reader.fieldnames or [])]
    missing = [col for col in ["Name", *LEGACY_COLUMNS] if col not in header]
    if missing:
        raise LegacyImportError("Unrecognized legacy stats sheet.", missing)

    game_id = store.add_game(LEGACY_GAME_OPPONENT, import_date or _date.today().isoformat())
    summary = ImportSummary(game_id=game_id)
    existing = {(p.name, p.number): p for p in store.list_players()}

    for row in reader:
        row = {(k or "").strip(): (v or "") for k, v in row.items() if k is not None}
        name = row.get("Name", "").strip()
        if not name or name in _TOTAL_ROW_NAMES:
            summary.skipped += 1
            continue
        number = row.get("Number", "").strip() or "?"
        player = existing.get((name, number))
        if player is None:
            player = store.add_player(name, number)
            existing[(name, number)] = player
        counts = {field_name: _as_int(row.get(col)) for col, field_name in LEGACY_COLUMNS.items()}
        counts["e"] = 0
        store.upsert_stat_line(player.player_id, game_id, counts)
        summary.imported.append(player.player_id)

    _LOGGER.info(
        "Imported %d legacy stat lines (%d rows skipped)",
        len(summary.imported),
        summary.skipped,
    )
    return summary


def import_legacy_csv(
    store: Any, path: str | Path, *, import_date: Optional[str] = None
) -> ImportSummary:
    """Read ``path`` and import it with :func:`import_legacy_rows`."""

    text = Path(path).read_text(encoding="utf-8")
    return import_legacy_rows(store, text, import_date=import_date)


__all__ = [
    "ImportSummary",
    "LEGACY_COLUMNS",
    "LEGACY_GAME_OPPONENT",
    "import_legacy_csv",
    "import_legacy_rows",
]
