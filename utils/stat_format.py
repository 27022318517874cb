from __future__ import annotations

"""Display helpers for batting numbers."""

import math


def format_rate(value: float) -> str:
    """Return ``value`` the way a box score prints it: ``.300``, ``1.000``."""

    text = f"{value:.3f}"
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def format_ops(value: float) -> str:
    return f"{value:.3f}"


def format_index(value: float) -> str:
    """Whole-number index; halves round up (``112.5`` -> ``'113'``)."""
    return str(int(math.floor(value + 0.5)))


def format_pct(fraction: float) -> str:
    """``0.125`` -> ``'12.5'``."""
    return f"{fraction * 100:.1f}"


__all__ = ["format_index", "format_ops", "format_pct", "format_rate"]
