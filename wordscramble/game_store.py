from __future__ import annotations

import logging
import random
from datetime import UTC, datetime
from uuid import UUID, uuid4

import redis

from wordscramble.api.models import GameState, GameView
from wordscramble.assets.startup import get_assets
from wordscramble.core.engine import GameEngine
from wordscramble.core.events import GameEvent
from wordscramble.core.outcomes import Ignored, SubmissionOutcome, outcome_from_view
from wordscramble.lock import game_lock
from wordscramble.settings import get_settings
from wordscramble.streams import events_key, publish_many

logger = logging.getLogger(__name__)

GAMES_SET_KEY = "wordscramble:games"
GAME_KEY_PREFIX = "wordscramble:game:"  # + {uuid}


def _now() -> datetime:
    return datetime.now(tz=UTC)


def _game_key(game_id: UUID) -> str:
    return f"{GAME_KEY_PREFIX}{game_id}"


def _new_seed() -> int:
    return random.SystemRandom().randint(1, 2**31 - 1)


def resolve_language(language: str | None) -> str:
    lang = (language or get_settings().language).strip().lower()
    assets = get_assets()
    if not assets.has_language(lang):
        available = ",".join(assets.languages)
        raise ValueError(f"Unsupported language '{lang}' (available: {available})")
    return lang


def view_of(engine: GameEngine) -> GameView:
    outcome = engine.last_outcome
    return GameView.model_validate(
        {
            **engine.snapshot().model_dump(),
            "last_outcome": outcome.to_view() if outcome is not None else None,
        }
    )


def _engine_for(view: GameView, *, rng: random.Random | None = None) -> GameEngine:
    assets = get_assets()
    state = GameState.model_validate(view.model_dump(exclude={"last_outcome"}))
    last = outcome_from_view(view.last_outcome) if view.last_outcome is not None else None
    return GameEngine.from_state(
        state,
        corpus=assets.root_words,
        dictionary=assets.dictionary,
        rng=rng,
        last_outcome=last,
    )


def save_game(*, r: redis.Redis, view: GameView) -> None:
    ttl_s = get_settings().game_ttl_s
    r.set(_game_key(view.game_id), view.model_dump_json(), ex=ttl_s)
    r.sadd(GAMES_SET_KEY, str(view.game_id))


def _publish(*, r: redis.Redis, game_id: UUID, events: list[GameEvent]) -> None:
    if not events:
        return
    publish_many(r=r, events=events)
    r.expire(events_key(str(game_id)), get_settings().game_ttl_s)


def get_game(*, r: redis.Redis, game_id: UUID) -> GameView | None:
    raw = r.get(_game_key(game_id))
    if not raw:
        return None
    return GameView.model_validate_json(raw)


def require_game(*, r: redis.Redis, game_id: UUID) -> GameView:
    view = get_game(r=r, game_id=game_id)
    if view is None:
        raise LookupError("Game not found")
    return view


def create_game(*, r: redis.Redis, language: str | None = None) -> GameView:
    lang = resolve_language(language)
    assets = get_assets()

    seed = _new_seed()
    now = _now()
    state = GameState(game_id=uuid4(), created_at=now, last_updated_at=now, seed=seed, language=lang)

    engine = GameEngine(
        corpus=assets.root_words,
        dictionary=assets.dictionary,
        rng=random.Random(seed),
        state=state,
    )
    events: list[GameEvent] = []
    engine.subscribe(events.append)
    engine.start_game()

    view = view_of(engine)
    save_game(r=r, view=view)
    _publish(r=r, game_id=view.game_id, events=events)
    logger.info("created game %s (language=%s)", view.game_id, lang)
    return view


def submit_word(*, r: redis.Redis, game_id: UUID, word: str) -> tuple[SubmissionOutcome, GameView]:
    with game_lock(r=r, game_id=str(game_id)):
        engine = _engine_for(require_game(r=r, game_id=game_id))
        events: list[GameEvent] = []
        engine.subscribe(events.append)

        outcome = engine.submit(word)
        view = view_of(engine)
        if isinstance(outcome, Ignored):
            return outcome, view

        save_game(r=r, view=view)
        _publish(r=r, game_id=game_id, events=events)
        return outcome, view


def restart_game(*, r: redis.Redis, game_id: UUID) -> GameView:
    with game_lock(r=r, game_id=str(game_id)):
        stored = require_game(r=r, game_id=game_id)

        # Fresh seed so the new root word is drawn independently of the last one.
        seed = _new_seed()
        stored.seed = seed
        engine = _engine_for(stored, rng=random.Random(seed))
        events: list[GameEvent] = []
        engine.subscribe(events.append)
        engine.restart()

        view = view_of(engine)
        save_game(r=r, view=view)
        _publish(r=r, game_id=game_id, events=events)
        return view


def list_games(*, r: redis.Redis) -> list[GameView]:
    ids = sorted(r.smembers(GAMES_SET_KEY))
    out: list[GameView] = []
    for sid in ids:
        try:
            gid = UUID(sid)
        except ValueError:
            continue
        view = get_game(r=r, game_id=gid)
        if view is None:
            # Expired session; drop the dangling id.
            r.srem(GAMES_SET_KEY, sid)
            continue
        out.append(view)
    out.sort(key=lambda v: v.created_at, reverse=True)
    return out
