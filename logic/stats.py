from __future__ import annotations

"""Aggregate counting and rate statistics over a set of stat lines.

Every call sums whatever collection it is handed: one player's career, one
game, the whole team or a last-N-games window. Scope selection belongs to the
caller. Nothing is cached between calls.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Mapping

# Linear weights for the simplified wOBA.  Fixed constants, not calibrated to
# any league-year.
WOBA_WEIGHTS: Dict[str, float] = {
    "bb": 0.69,
    "h1": 0.89,
    "h2": 1.27,
    "h3": 1.62,
    "hr": 2.10,
}

_SUMMED_FIELDS = ("pa", "ab", "h1", "h2", "h3", "hr", "rbi", "bb", "so", "sf", "e")


@dataclass(frozen=True)
class AggregateStats:
    pa: int = 0
    ab: int = 0
    h: int = 0
    h1: int = 0
    h2: int = 0
    h3: int = 0
    hr: int = 0
    bb: int = 0
    so: int = 0
    sf: int = 0
    rbi: int = 0
    e: int = 0
    tb: int = 0
    avg: float = 0.0
    obp: float = 0.0
    slg: float = 0.0
    ops: float = 0.0
    iso: float = 0.0
    woba: float = 0.0
    bb_pct: float = 0.0
    k_pct: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _count(line: Any, name: str) -> int:
    if isinstance(line, Mapping):
        raw = line.get(name)
    else:
        raw = getattr(line, name, None)
    if raw in (None, ""):
        return 0
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return 0


def sum_counting_stats(stat_lines: Iterable[Any]) -> Dict[str, int]:
    """Return summed counting stats for ``stat_lines``.

    Accepts :class:`models.stat_line.StatLine` objects or plain mappings such
    as raw store rows; missing fields count as zero.
    """

    totals = {name: 0 for name in _SUMMED_FIELDS}
    for line in stat_lines:
        for name in _SUMMED_FIELDS:
            totals[name] += _count(line, name)
    totals["h"] = totals["h1"] + totals["h2"] + totals["h3"] + totals["hr"]
    totals["tb"] = (
        totals["h1"] + 2 * totals["h2"] + 3 * totals["h3"] + 4 * totals["hr"]
    )
    return totals


def compute_rates(totals: Mapping[str, int]) -> Dict[str, float]:
    """Return rate-based batting metrics from summed counting stats."""

    ab = totals.get("ab", 0)
    pa = totals.get("pa", 0)
    h = totals.get("h", 0)
    bb = totals.get("bb", 0)
    sf = totals.get("sf", 0)
    tb = totals.get("tb", 0)

    avg = h / ab if ab else 0.0
    obp_den = ab + bb + sf
    obp = (h + bb) / obp_den if obp_den else 0.0
    slg = tb / ab if ab else 0.0
    ops = obp + slg
    iso = slg - avg
    woba_num = sum(weight * totals.get(key, 0) for key, weight in WOBA_WEIGHTS.items())
    woba = woba_num / obp_den if obp_den else 0.0
    bb_pct = bb / pa if pa else 0.0
    k_pct = totals.get("so", 0) / pa if pa else 0.0

    return {
        "avg": avg,
        "obp": obp,
        "slg": slg,
        "ops": ops,
        "iso": iso,
        "woba": woba,
        "bb_pct": bb_pct,
        "k_pct": k_pct,
    }


def compute_aggregate(stat_lines: Iterable[Any]) -> AggregateStats:
    """Return :class:`AggregateStats` for any collection of stat lines.

    Never raises: an empty collection yields all zeros and every rate whose
    denominator is zero is reported as ``0.0``.
    """

    totals = sum_counting_stats(stat_lines)
    rates = compute_rates(totals)
    return AggregateStats(**totals, **rates)


__all__ = [
    "AggregateStats",
    "WOBA_WEIGHTS",
    "compute_aggregate",
    "compute_rates",
    "sum_counting_stats",
]
