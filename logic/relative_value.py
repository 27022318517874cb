from __future__ import annotations

"""OPS+-style index of a hitter against a reference baseline."""

from typing import Any, Iterable, Tuple

from logic.stats import compute_aggregate

NEUTRAL_INDEX = 100.0


def relative_value_index(
    obp: float, slg: float, team_obp: float, team_slg: float
) -> float:
    """Return ``100 * (obp/team_obp + slg/team_slg - 1)``.

    A zero baseline component means there is nothing to compare against, so
    the neutral ``100`` is returned.
    """

    if not team_obp or not team_slg:
        return NEUTRAL_INDEX
    return 100.0 * ((obp / team_obp) + (slg / team_slg) - 1.0)


def team_baseline(stat_lines: Iterable[Any]) -> Tuple[float, float]:
    """Return ``(obp, slg)`` for the reference population in ``stat_lines``."""

    totals = compute_aggregate(stat_lines)
    return totals.obp, totals.slg


__all__ = ["NEUTRAL_INDEX", "relative_value_index", "team_baseline"]
