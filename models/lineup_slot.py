from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LineupSlot:
    order: int
    player: Any
    role_name: str
    reason_text: str
    value: float = 0.0
