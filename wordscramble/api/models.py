from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field


class GameCreateRequest(BaseModel):
    # None => configured default language.
    language: str | None = Field(default=None, min_length=1, max_length=16)


class SubmitWordRequest(BaseModel):
    # Blank input is allowed on purpose: the engine ignores it silently.
    word: str = Field(..., max_length=200)


class GamePhase(StrEnum):
    not_started = "not_started"
    active = "active"


class GameState(BaseModel):
    game_id: UUID
    created_at: datetime
    last_updated_at: datetime

    # Seed of the rng that drew the current root word.
    seed: int | None = None

    language: str = "en"

    phase: GamePhase = GamePhase.not_started

    root_word: str = ""

    # Most recent first.
    used_words: list[str] = Field(default_factory=list)

    score: int = Field(default=0, ge=0)


class OutcomeView(BaseModel):
    kind: str
    word: str | None = None
    new_score: int | None = None

    # Only set for rejections.
    reason: str | None = None
    title: str | None = None
    message: str | None = None


class GameView(GameState):
    last_outcome: OutcomeView | None = None


class SubmitResponse(BaseModel):
    outcome: OutcomeView
    game: GameView


class GameListResponse(BaseModel):
    games: list[GameView]
