from __future__ import annotations

from contextlib import contextmanager

import redis


class GameBusyError(ValueError):
    pass


@contextmanager
def game_lock(*, r: redis.Redis, game_id: str, ttl_ms: int = 5_000):
    """Best-effort per-game lock.

    Serializes mutations of one session across requests. Single-holder only:
    the release does not check a token.
    """

    key = f"lock:game:{game_id}"
    acquired = r.set(key, "1", nx=True, px=ttl_ms)
    if not acquired:
        raise GameBusyError("Game is busy")
    try:
        yield
    finally:
        r.delete(key)
