from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Literal

EventType = Literal[
    "GAME_STARTED",
    "WORD_ACCEPTED",
    "WORD_REJECTED",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    game_id: str
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, game_id: str, payload: dict[str, Any]) -> "GameEvent":
        return GameEvent(type=type, game_id=game_id, payload=payload, ts=datetime.now(timezone.utc))

    def to_fields(self) -> dict[str, str]:
        """Flatten into string fields (Redis Stream entry shape)."""

        fields = {"type": self.type, "game_id": self.game_id, "ts": self.ts.isoformat()}
        for k, v in self.payload.items():
            fields[str(k)] = ",".join(v) if isinstance(v, (list, tuple)) else str(v)
        return fields


EventListener = Callable[[GameEvent], None]
