from __future__ import annotations

import asyncio
from collections import defaultdict

from fastapi import WebSocket, WebSocketDisconnect


class GameWebSocketHub:
    """In-process WebSocket pub/sub keyed by game_id.

    A UI connects once per game and re-fetches `/game/{id}` whenever it is told
    the game changed. Payloads are small JSON dicts; state is never pushed.
    Single API replica only.
    """

    def __init__(self) -> None:
        self._by_game: dict[str, set[WebSocket]] = defaultdict(set)
        self._lock = asyncio.Lock()

    async def connect(self, game_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._by_game[game_id].add(websocket)

    async def disconnect(self, game_id: str, websocket: WebSocket) -> None:
        async with self._lock:
            conns = self._by_game.get(game_id)
            if not conns:
                return
            conns.discard(websocket)
            if not conns:
                self._by_game.pop(game_id, None)

    def connection_count(self, game_id: str) -> int:
        return len(self._by_game.get(game_id, ()))

    async def broadcast(self, game_id: str, payload: dict[str, object]) -> None:
        async with self._lock:
            conns = list(self._by_game.get(game_id, set()))

        dead: list[WebSocket] = []
        for ws in conns:
            try:
                await ws.send_json(payload)
            except (WebSocketDisconnect, RuntimeError):
                dead.append(ws)

        for ws in dead:
            await self.disconnect(game_id, ws)


hub = GameWebSocketHub()


def game_updated(game_id: str, **extra: object) -> dict[str, object]:
    return {"type": "game_updated", "game_id": game_id, **extra}
