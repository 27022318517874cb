from __future__ import annotations

"""Record a finished box score: one game plus a stat line per player."""

import logging
from typing import Any, Mapping

from models.stat_line import COUNTING_FIELDS

_LOGGER = logging.getLogger(__name__)


def record_game(
    store: Any,
    opponent: str,
    date: str,
    lines: Mapping[str, Mapping[str, Any]],
    *,
    finish: bool = False,
) -> str:
    """Add a game vs ``opponent`` and upsert ``lines`` keyed by player id.

    Fields a line leaves out are stored as ``0``.  Returns the new game id.
    Unknown player ids raise :class:`UnknownRecordError` before anything is
    written.
    """

    if not (opponent or "").strip():
        raise ValueError("Opponent is required")
    for player_id in lines:
        store.get_player(player_id)
    game_id = store.add_game(opponent, date)
    for player_id, counts in lines.items():
        full = {name: counts.get(name, 0) for name in COUNTING_FIELDS}
        store.upsert_stat_line(player_id, game_id, full)
    if finish:
        store.finish_game(game_id)
    _LOGGER.info("Recorded %d stat lines for game %s", len(lines), game_id)
    return game_id


__all__ = ["record_game"]
