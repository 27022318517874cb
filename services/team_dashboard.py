from __future__ import annotations

"""Team landing-page numbers: season totals plus who is hot and who is cold."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from logic.stats import AggregateStats, compute_aggregate
from models.player import Player
from utils.game_windows import filter_stat_lines, recent_game_ids
from utils.tracker_config import TrackerConfig, load_config


@dataclass(frozen=True)
class PlayerForm:
    player: Player
    stats: AggregateStats


@dataclass
class TeamDashboard:
    totals: AggregateStats
    games_played: int
    hot: List[PlayerForm] = field(default_factory=list)
    cold: List[PlayerForm] = field(default_factory=list)


def recent_form(store: Any, window: int) -> List[PlayerForm]:
    """Aggregate each player over the last ``window`` games; AB > 0 only."""

    ids = recent_game_ids(store.list_games(), window)
    lines = filter_stat_lines(store.list_stat_lines(), game_ids=ids)
    forms = []
    for player in store.list_players():
        stats = compute_aggregate(filter_stat_lines(lines, player_id=player.player_id))
        if stats.ab > 0:
            forms.append(PlayerForm(player, stats))
    return forms


def build_dashboard(store: Any, *, config: Optional[TrackerConfig] = None) -> TeamDashboard:
    cfg = config or load_config()
    games = store.list_games()
    forms = recent_form(store, cfg.hot_cold_window)
    count = cfg.hot_cold_count
    # sorted() is stable, so OPS ties keep roster order in both lists.
    hot = sorted(forms, key=lambda f: f.stats.ops, reverse=True)[:count]
    cold = sorted(forms, key=lambda f: f.stats.ops)[:count]
    return TeamDashboard(
        totals=compute_aggregate(store.list_stat_lines()),
        games_played=len(games),
        hot=hot,
        cold=cold,
    )


__all__ = ["PlayerForm", "TeamDashboard", "build_dashboard", "recent_form"]
