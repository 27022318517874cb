from __future__ import annotations

"""Percentile standing of a value within a reference population."""

import math
from typing import Iterable


def percentile(value: float, population: Iterable[float]) -> int:
    """Return the midpoint-rank percentile of ``value`` in ``population``.

    Values tied with ``value`` count as half below, half above, so a block of
    equal values lands on the middle of its range instead of all claiming the
    top.  Rounds half up.  An empty population yields ``0``.
    """

    values = sorted(population)
    if not values:
        return 0
    below = sum(1 for v in values if v < value)
    tied = sum(1 for v in values if v == value)
    raw = (below + 0.5 * tied) / len(values) * 100
    return int(math.floor(raw + 0.5))


def inverted_percentile(value: float, population: Iterable[float]) -> int:
    """Percentile for metrics where a lower raw value is better (e.g. K%)."""

    return 100 - percentile(value, population)


__all__ = ["inverted_percentile", "percentile"]
