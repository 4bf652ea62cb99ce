from __future__ import annotations

from collections.abc import Sequence
from typing import cast

import redis

from wordscramble.core.events import GameEvent


def events_key(game_id: str) -> str:
    return f"events:{game_id}"


def publish_event(*, r: redis.Redis, event: GameEvent) -> str:
    """Append an engine event to its game's stream."""

    # redis-py stubs expect field/value unions; we only use string fields/values.
    stream_id = r.xadd(events_key(event.game_id), event.to_fields())
    return cast(str, stream_id)


def publish_many(*, r: redis.Redis, events: Sequence[GameEvent]) -> list[str]:
    return [publish_event(r=r, event=e) for e in events]


def read_events(*, r: redis.Redis, game_id: str, count: int = 20, start: str = "-", end: str = "+") -> list[dict[str, object]]:
    entries = r.xrange(events_key(game_id), min=start, max=end, count=count)
    return [{"id": mid, "fields": fields} for mid, fields in entries]
