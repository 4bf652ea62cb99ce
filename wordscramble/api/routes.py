from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
import redis

from wordscramble.api.deps import get_redis
from wordscramble.api.models import (
    GameCreateRequest,
    GameListResponse,
    GameView,
    SubmitResponse,
    SubmitWordRequest,
)
from wordscramble.core.outcomes import Ignored
from wordscramble.game_store import create_game, get_game, list_games, restart_game, submit_word
from wordscramble.lock import GameBusyError
from wordscramble.streams import events_key, read_events
from wordscramble.websocket_hub import game_updated, hub

router = APIRouter()


@router.websocket("/ws/game/{game_id}")
async def game_updates_ws(websocket: WebSocket, game_id: UUID) -> None:
    gid = str(game_id)
    await hub.connect(gid, websocket)

    try:
        # Keep the socket open; client can optionally send pings.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await hub.disconnect(gid, websocket)
    except Exception:
        await hub.disconnect(gid, websocket)
        raise


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/game", response_model=GameView, status_code=status.HTTP_201_CREATED)
async def create_game_route(
    payload: GameCreateRequest | None = None,
    r: redis.Redis = Depends(get_redis),
) -> GameView:
    try:
        view = create_game(r=r, language=payload.language if payload else None)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    await hub.broadcast(str(view.game_id), game_updated(str(view.game_id)))
    return view


@router.get("/game", response_model=GameListResponse)
async def list_games_route(r: redis.Redis = Depends(get_redis)) -> GameListResponse:
    return GameListResponse(games=list_games(r=r))


@router.get("/game/{game_id}", response_model=GameView)
async def get_game_route(game_id: UUID, r: redis.Redis = Depends(get_redis)) -> GameView:
    view = get_game(r=r, game_id=game_id)
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return view


@router.post("/game/{game_id}/words", response_model=SubmitResponse)
async def submit_word_route(
    game_id: UUID,
    payload: SubmitWordRequest,
    r: redis.Redis = Depends(get_redis),
) -> SubmitResponse:
    try:
        outcome, view = submit_word(r=r, game_id=game_id, word=payload.word)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GameBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    # Blank input changes nothing, so nobody needs to re-render.
    if not isinstance(outcome, Ignored):
        await hub.broadcast(str(game_id), game_updated(str(game_id), outcome=outcome.to_view().kind))
    return SubmitResponse(outcome=outcome.to_view(), game=view)


@router.post("/game/{game_id}/restart", response_model=GameView)
async def restart_game_route(game_id: UUID, r: redis.Redis = Depends(get_redis)) -> GameView:
    try:
        view = restart_game(r=r, game_id=game_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GameBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    await hub.broadcast(str(game_id), game_updated(str(game_id)))
    return view


@router.get("/game/{game_id}/events")
async def get_game_events_route(
    game_id: UUID,
    count: int = 20,
    start: str = "-",
    end: str = "+",
    r: redis.Redis = Depends(get_redis),
) -> dict[str, object]:
    """Debug endpoint: read a game's event Redis Stream."""

    if count < 1 or count > 200:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="count must be between 1 and 200")

    try:
        messages = read_events(r=r, game_id=str(game_id), count=count, start=start, end=end)
    except redis.ResponseError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    return {"game_id": str(game_id), "stream": events_key(str(game_id)), "messages": messages}
