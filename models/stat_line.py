from __future__ import annotations

"""Per-player, per-game batting line."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

# Counting fields in the order they are stored and entered on the score sheet.
COUNTING_FIELDS: tuple[str, ...] = (
    "pa",
    "ab",
    "h1",
    "h2",
    "h3",
    "hr",
    "rbi",
    "bb",
    "so",
    "sf",
    "e",
)


def _as_int(value: Any) -> int:
    """Return ``value`` as an ``int``; blanks and junk read as ``0``."""

    if value in (None, ""):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass
class StatLine:
    """Counting stats for one player in one game.

    ``h1 + h2 + h3 + hr <= ab <= pa`` is expected but never enforced: lines
    imported from old score books do not always add up.
    """

    player_id: str
    game_id: str
    pa: int = 0
    ab: int = 0
    h1: int = 0
    h2: int = 0
    h3: int = 0
    hr: int = 0
    rbi: int = 0
    bb: int = 0
    so: int = 0
    sf: int = 0
    e: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return (self.player_id, self.game_id)

    @property
    def h(self) -> int:
        return self.h1 + self.h2 + self.h3 + self.hr

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StatLine":
        counts = {name: _as_int(row.get(name)) for name in COUNTING_FIELDS}
        return cls(
            player_id=str(row.get("player_id") or "").strip(),
            game_id=str(row.get("game_id") or "").strip(),
            **counts,
        )

    def to_row(self) -> dict[str, Any]:
        return asdict(self)

    def with_counts(self, counts: Mapping[str, Any]) -> "StatLine":
        """Return a copy with ``counts`` applied; unknown keys are ignored."""

        known = {f.name for f in fields(self)} & set(COUNTING_FIELDS)
        updated = self.to_row()
        for name, value in counts.items():
            if name in known:
                updated[name] = _as_int(value)
        return StatLine(**updated)


__all__ = ["COUNTING_FIELDS", "StatLine"]
