from __future__ import annotations

"""Greedy batting-order builder.

Each lineup position names one rate stat it cares about.  Positions are
filled in order 1..N; every position takes the best remaining hitter on its
stat.  This favours local fit per slot and is not a globally optimal
assignment.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, NamedTuple, Sequence

from models.lineup_slot import LineupSlot


class RosterEntry(NamedTuple):
    player: Any
    stats: Any  # AggregateStats or a mapping of rate stats


@dataclass(frozen=True)
class SlotRule:
    name: str
    metric: str
    rationale: str

    def score(self, stats: Any) -> float:
        if isinstance(stats, Mapping):
            raw = stats.get(self.metric, 0.0)
        else:
            raw = getattr(stats, self.metric, 0.0)
        try:
            return float(raw or 0.0)
        except (TypeError, ValueError):
            return 0.0


LINEUP_SLOTS: tuple[SlotRule, ...] = (
    SlotRule("Leadoff", "obp", "get on base"),
    SlotRule("2nd Hole", "avg", "contact hitter"),
    SlotRule("3rd Hole", "ops", "best overall hitter"),
    SlotRule("Cleanup", "slg", "power/RBI production"),
    SlotRule("5th Spot", "ops", "protect cleanup"),
    SlotRule("6th Spot", "ops", "depth"),
    SlotRule("7th Spot", "ops", "depth"),
    SlotRule("8th Spot", "ops", "depth"),
    SlotRule("9th Spot", "obp", "turn the lineup over"),
)


def slot_rule(position: int) -> SlotRule:
    """Return the rule for 1-based ``position``; past nine it is OPS depth."""

    if 1 <= position <= len(LINEUP_SLOTS):
        return LINEUP_SLOTS[position - 1]
    return SlotRule(f"{position}th Spot", "ops", "remaining depth")


def generate_lineup(roster: Sequence[Any]) -> List[LineupSlot]:
    """Assign every roster member to a batting-order slot.

    ``roster`` holds ``(player, stats)`` pairs (see :class:`RosterEntry`).
    Ties on a slot's stat go to whoever appears first in ``roster``.  An empty
    roster gives an empty lineup.
    """

    entries = [RosterEntry(*entry) for entry in roster]
    remaining = list(range(len(entries)))
    lineup: List[LineupSlot] = []

    for position in range(1, len(entries) + 1):
        rule = slot_rule(position)
        best_idx = remaining[0]
        best_score = rule.score(entries[best_idx].stats)
        for idx in remaining[1:]:
            score = rule.score(entries[idx].stats)
            if score > best_score:
                best_idx, best_score = idx, score
        remaining.remove(best_idx)
        lineup.append(
            LineupSlot(
                order=position,
                player=entries[best_idx].player,
                role_name=rule.name,
                reason_text=f"{rule.rationale} ({best_score:.3f})",
                value=best_score,
            )
        )
    return lineup


__all__ = [
    "LINEUP_SLOTS",
    "RosterEntry",
    "SlotRule",
    "generate_lineup",
    "slot_rule",
]
