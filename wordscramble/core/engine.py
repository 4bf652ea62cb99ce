"""Word-validation and game-state engine.

One `GameEngine` is one game session. It owns the `GameState` and is the only
thing that mutates it; UIs read it through the accessors or subscribe to
`GameEvent`s.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from uuid import UUID, uuid4

from wordscramble.api.models import GamePhase, GameState
from wordscramble.core.dictionary import WordChecker, normalize_word
from wordscramble.core.events import EventListener, GameEvent
from wordscramble.core.outcomes import Accepted, Ignored, Rejected, SubmissionOutcome
from wordscramble.core.selector import FALLBACK_ROOT_WORD, EmptyCorpusError, RootWordSelector
from wordscramble.fsm import GameFSM
from wordscramble.turn_processing.validators import CheckPipeline, SubmissionRejected, default_pipeline

logger = logging.getLogger(__name__)

CorpusProvider = Callable[[], Sequence[str]]


class GameNotStartedError(RuntimeError):
    pass


def _now() -> datetime:
    return datetime.now(tz=UTC)


class GameEngine:
    def __init__(
        self,
        *,
        corpus: CorpusProvider,
        dictionary: WordChecker,
        language: str = "en",
        rng: random.Random | None = None,
        selector: RootWordSelector | None = None,
        pipeline: CheckPipeline | None = None,
        game_id: UUID | None = None,
        state: GameState | None = None,
    ) -> None:
        self._corpus = corpus
        self._selector = selector or RootWordSelector(rng)
        self._pipeline = pipeline or default_pipeline(dictionary=dictionary)
        self._listeners: list[EventListener] = []
        self._last_outcome: SubmissionOutcome | None = None

        if state is None:
            now = _now()
            state = GameState(
                game_id=game_id or uuid4(),
                created_at=now,
                last_updated_at=now,
                language=language,
            )
        self._state = state
        self._fsm = GameFSM(self._state)

    @classmethod
    def from_state(
        cls,
        state: GameState,
        *,
        corpus: CorpusProvider,
        dictionary: WordChecker,
        rng: random.Random | None = None,
        last_outcome: SubmissionOutcome | None = None,
    ) -> "GameEngine":
        """Resume a session from a stored state."""

        engine = cls(
            corpus=corpus,
            dictionary=dictionary,
            rng=rng,
            state=state.model_copy(deep=True),
        )
        engine._last_outcome = last_outcome
        return engine

    @property
    def game_id(self) -> UUID:
        return self._state.game_id

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def root_word(self) -> str:
        return self._state.root_word

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def used_words(self) -> tuple[str, ...]:
        return tuple(self._state.used_words)

    @property
    def last_outcome(self) -> SubmissionOutcome | None:
        return self._last_outcome

    def snapshot(self) -> GameState:
        return self._state.model_copy(deep=True)

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def start_game(self) -> None:
        try:
            root_word = self._selector.select(self._corpus())
        except EmptyCorpusError:
            logger.warning("Empty root word corpus; falling back to %r", FALLBACK_ROOT_WORD)
            root_word = FALLBACK_ROOT_WORD

        self._fsm.begin()
        self._fsm.sync_phase_to_model()

        self._state.root_word = root_word
        self._state.used_words = []
        self._state.score = 0
        self._state.last_updated_at = _now()
        self._last_outcome = None

        logger.debug("game %s started with root word %r", self.game_id, root_word)
        self._emit(
            GameEvent.now(
                type="GAME_STARTED",
                game_id=str(self.game_id),
                payload={"root_word": root_word, "language": self._state.language},
            )
        )

    def restart(self) -> None:
        self.start_game()

    def submit(self, raw: str) -> SubmissionOutcome:
        if not self._fsm.in_play:
            raise GameNotStartedError("Call start_game() before submitting words")

        word = normalize_word(raw)
        if not word:
            return Ignored()

        try:
            self._pipeline.check(word=word, state=self._state)
        except SubmissionRejected as e:
            rejected = Rejected(word=word, reason=e.reason)
            self._last_outcome = rejected
            logger.debug("game %s rejected %r: %s", self.game_id, word, e.reason.value)
            self._emit(
                GameEvent.now(
                    type="WORD_REJECTED",
                    game_id=str(self.game_id),
                    payload={"word": word, "reason": e.reason.value},
                )
            )
            return rejected

        self._state.score += 1
        self._state.used_words.insert(0, word)
        self._state.last_updated_at = _now()

        accepted = Accepted(word=word, new_score=self._state.score)
        self._last_outcome = accepted
        logger.debug("game %s accepted %r (score=%d)", self.game_id, word, self._state.score)
        self._emit(
            GameEvent.now(
                type="WORD_ACCEPTED",
                game_id=str(self.game_id),
                payload={"word": word, "score": self._state.score},
            )
        )
        return accepted
