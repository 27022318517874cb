from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Player:
    player_id: str
    name: str
    number: str = ""
    image_url: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Player":
        image = (row.get("image_url") or "").strip() or None
        return cls(
            player_id=str(row.get("player_id") or row.get("id") or "").strip(),
            name=str(row.get("name") or "").strip(),
            number=str(row.get("number") or "").strip(),
            image_url=image,
        )

    def to_row(self) -> dict[str, str]:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "number": self.number,
            "image_url": self.image_url or "",
        }

    @property
    def display_name(self) -> str:
        if self.number:
            return f"#{self.number} {self.name}"
        return self.name
