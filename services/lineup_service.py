from __future__ import annotations

"""Build a batting order for a selected group of players."""

import logging
from typing import Any, Iterable, List, Optional

from logic.lineup import RosterEntry, generate_lineup
from logic.stats import compute_aggregate
from models.lineup_slot import LineupSlot
from utils.game_windows import filter_stat_lines, recent_game_ids
from utils.tracker_config import TrackerConfig, load_config

_LOGGER = logging.getLogger(__name__)


def build_roster(
    store: Any, player_ids: Iterable[str], *, window: Optional[int] = None
) -> List[RosterEntry]:
    """Return ``(player, aggregate)`` pairs for the selected players.

    Players keep the store's order.  ``window`` limits each aggregate to the
    last ``window`` games; ``None`` means career.
    """

    selected = set(player_ids)
    lines = store.list_stat_lines()
    game_ids = recent_game_ids(store.list_games(), window) if window else None
    roster: List[RosterEntry] = []
    for player in store.list_players():
        if player.player_id not in selected:
            continue
        player_lines = filter_stat_lines(
            lines, player_id=player.player_id, game_ids=game_ids
        )
        roster.append(RosterEntry(player, compute_aggregate(player_lines)))
    missing = selected - {entry.player.player_id for entry in roster}
    if missing:
        _LOGGER.warning("Ignoring unknown player ids: %s", ", ".join(sorted(missing)))
    return roster


def build_lineup(
    store: Any,
    player_ids: Iterable[str],
    *,
    window: Optional[int] = None,
    allow_partial: bool = False,
    config: Optional[TrackerConfig] = None,
) -> List[LineupSlot]:
    """Return the suggested batting order for ``player_ids``.

    Fewer than ``min_lineup_size`` players is rejected unless
    ``allow_partial`` is set.
    """

    cfg = config or load_config()
    roster = build_roster(store, player_ids, window=window)
    if len(roster) < cfg.min_lineup_size and not allow_partial:
        raise ValueError(
            f"Select at least {cfg.min_lineup_size} players (got {len(roster)})"
        )
    return generate_lineup(roster)


__all__ = ["build_lineup", "build_roster"]
