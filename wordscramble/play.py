"""Terminal play loop.

Drives a local `GameEngine` the same way the app screen does: one line per
submitted word, `:restart` for the refresh button, `:quit` (or EOF) to leave.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from wordscramble.assets.registry import WordAssets
from wordscramble.core.engine import GameEngine
from wordscramble.core.game_state_text import game_state_to_text
from wordscramble.core.outcomes import Ignored

RESTART_COMMAND = ":restart"
QUIT_COMMAND = ":quit"


def make_engine(*, assets: WordAssets, language: str, seed: int | None = None) -> GameEngine:
    return GameEngine(
        corpus=assets.root_words,
        dictionary=assets.dictionary,
        language=language,
        rng=random.Random(seed),
    )


def play(*, engine: GameEngine, read_line: Callable[[], str | None], write: Callable[[str], None]) -> int:
    """Run until quit/EOF. Returns the final score."""

    engine.start_game()
    write(game_state_to_text(state=engine.snapshot()))

    while True:
        line = read_line()
        if line is None or line.strip() == QUIT_COMMAND:
            break

        if line.strip() == RESTART_COMMAND:
            engine.restart()
        elif isinstance(engine.submit(line), Ignored):
            continue

        write(game_state_to_text(state=engine.snapshot(), outcome=engine.last_outcome))

    return engine.score
