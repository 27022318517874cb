from __future__ import annotations

"""Per-player stat page: split table, OPS+ and percentile chart vs teammates.

Percentiles compare a player's career numbers with every teammate who has at
least one plate appearance.  OPS+ is measured against the whole team's
totals, falling back to the configured default baseline while the team has
no qualifying data.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

from logic.percentile import inverted_percentile, percentile
from logic.relative_value import relative_value_index, team_baseline
from logic.stats import AggregateStats, compute_aggregate
from models.player import Player
from utils.game_windows import filter_stat_lines, recent_game_ids
from utils.stat_format import format_index, format_pct, format_rate
from utils.tracker_config import TrackerConfig, load_config

_LOGGER = logging.getLogger(__name__)

# (minimum percentile, band) checked top-down.
PERCENTILE_BANDS: Tuple[Tuple[int, str], ...] = (
    (90, "elite"),
    (75, "great"),
    (60, "above"),
    (40, "average"),
    (25, "below"),
    (0, "poor"),
)


def percentile_band(value: int) -> str:
    for threshold, band in PERCENTILE_BANDS:
        if value >= threshold:
            return band
    return "poor"


@dataclass(frozen=True)
class PercentileMetric:
    label: str
    value: float
    percentile: int
    display: str

    @property
    def band(self) -> str:
        return percentile_band(self.percentile)


@dataclass(frozen=True)
class SplitRow:
    label: str
    stats: AggregateStats


@dataclass
class PlayerReport:
    player: Player
    career: AggregateStats
    ops_plus: float
    baseline: Tuple[float, float]
    splits: List[SplitRow] = field(default_factory=list)
    percentiles: List[PercentileMetric] = field(default_factory=list)

    def metric(self, label: str) -> Optional[PercentileMetric]:
        return next((m for m in self.percentiles if m.label == label), None)


def resolve_baseline(stat_lines: Sequence[Any], config: TrackerConfig) -> Tuple[float, float]:
    """Team ``(obp, slg)`` with each zero component replaced by its default."""

    team_obp, team_slg = team_baseline(stat_lines)
    default_obp, default_slg = config.default_baseline
    return team_obp or default_obp, team_slg or default_slg


def _walk_rate(stats: AggregateStats) -> float:
    return stats.bb_pct


def _strikeout_rate(stats: AggregateStats) -> float:
    return stats.k_pct


def build_percentiles(
    career: AggregateStats,
    teammates: Sequence[AggregateStats],
    baseline: Tuple[float, float],
) -> List[PercentileMetric]:
    """Return the chart rows for ``career`` against ``teammates``."""

    team_obp, team_slg = baseline

    def ops_plus(stats: AggregateStats) -> float:
        return relative_value_index(stats.obp, stats.slg, team_obp, team_slg)

    rate_metrics: List[Tuple[str, Callable[[AggregateStats], float]]] = [
        ("xwOBA", lambda s: s.woba),
        ("xBA", lambda s: s.avg),
        ("xSLG", lambda s: s.slg),
    ]
    rows: List[PercentileMetric] = []
    for label, getter in rate_metrics:
        value = getter(career)
        rows.append(
            PercentileMetric(
                label,
                value,
                percentile(value, [getter(t) for t in teammates]),
                format_rate(value),
            )
        )

    player_ops_plus = ops_plus(career)
    rows.append(
        PercentileMetric(
            "OPS+",
            player_ops_plus,
            percentile(player_ops_plus, [ops_plus(t) for t in teammates]),
            format_index(player_ops_plus),
        )
    )

    bb_rate = _walk_rate(career)
    rows.append(
        PercentileMetric(
            "BB %",
            bb_rate * 100,
            percentile(bb_rate, [_walk_rate(t) for t in teammates]),
            format_pct(bb_rate),
        )
    )
    # Fewer strikeouts rank higher.
    k_rate = _strikeout_rate(career)
    rows.append(
        PercentileMetric(
            "K %",
            k_rate * 100,
            inverted_percentile(k_rate, [_strikeout_rate(t) for t in teammates]),
            format_pct(k_rate),
        )
    )
    rows.append(
        PercentileMetric(
            "ISO",
            career.iso,
            percentile(career.iso, [t.iso for t in teammates]),
            format_rate(career.iso),
        )
    )
    return rows


def build_player_report(
    store: Any, player_id: str, *, config: Optional[TrackerConfig] = None
) -> PlayerReport:
    """Assemble the stat page for ``player_id`` from the current store contents."""

    cfg = config or load_config()
    player = store.get_player(player_id)
    players = store.list_players()
    games = store.list_games()
    lines = store.list_stat_lines()

    baseline = resolve_baseline(lines, cfg)
    player_lines = filter_stat_lines(lines, player_id=player_id)
    career = compute_aggregate(player_lines)

    splits: List[SplitRow] = []
    for window in cfg.recent_windows:
        ids = recent_game_ids(games, window)
        splits.append(
            SplitRow(
                f"Last {window} Games",
                compute_aggregate(filter_stat_lines(player_lines, game_ids=ids)),
            )
        )
    splits.append(SplitRow("Career", career))

    teammates = []
    for teammate in players:
        stats = compute_aggregate(filter_stat_lines(lines, player_id=teammate.player_id))
        if stats.pa > 0:
            teammates.append(stats)

    report = PlayerReport(
        player=player,
        career=career,
        ops_plus=relative_value_index(career.obp, career.slg, *baseline),
        baseline=baseline,
        splits=splits,
        percentiles=build_percentiles(career, teammates, baseline),
    )
    _LOGGER.debug("Built report for %s against %d teammates", player_id, len(teammates))
    return report


__all__ = [
    "PERCENTILE_BANDS",
    "PercentileMetric",
    "PlayerReport",
    "SplitRow",
    "build_percentiles",
    "build_player_report",
    "percentile_band",
    "resolve_baseline",
]
