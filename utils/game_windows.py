from __future__ import annotations

"""Game-window selection used to build "Last N Games" splits."""

from typing import Any, Collection, Iterable, List, Optional, Sequence

from models.game import Game


def recent_game_ids(games: Sequence[Game], count: int) -> List[str]:
    """Return ids of the ``count`` most recent games, newest first.

    Dates are ISO strings so they sort lexically; games sharing a date keep
    their store order.
    """

    if count <= 0:
        return []
    ordered = sorted(games, key=lambda g: g.date, reverse=True)
    return [g.game_id for g in ordered[:count]]


def filter_stat_lines(
    stat_lines: Iterable[Any],
    *,
    player_id: Optional[str] = None,
    game_ids: Optional[Collection[str]] = None,
) -> list:
    """Return the lines matching ``player_id`` and/or ``game_ids``."""

    wanted = set(game_ids) if game_ids is not None else None
    selected = []
    for line in stat_lines:
        if player_id is not None and line.player_id != player_id:
            continue
        if wanted is not None and line.game_id not in wanted:
            continue
        selected.append(line)
    return selected


__all__ = ["filter_stat_lines", "recent_game_ids"]
