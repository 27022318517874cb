from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Game:
    game_id: str
    opponent: str
    date: str  # ISO ``YYYY-MM-DD``
    is_finished: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Game":
        finished = str(row.get("is_finished", "")).strip().lower() in {
            "1",
            "true",
            "yes",
        }
        return cls(
            game_id=str(row.get("game_id") or row.get("id") or "").strip(),
            opponent=str(row.get("opponent") or "").strip(),
            date=str(row.get("date") or "").strip(),
            is_finished=finished,
        )

    def to_row(self) -> dict[str, str]:
        return {
            "game_id": self.game_id,
            "opponent": self.opponent,
            "date": self.date,
            "is_finished": "1" if self.is_finished else "0",
        }
