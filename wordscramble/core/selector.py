from __future__ import annotations

import random
from collections.abc import Sequence

from wordscramble.core.dictionary import normalize_word
from wordscramble.turn_processing.validators import MIN_WORD_LENGTH

# Root word used when the corpus has nothing to offer.
FALLBACK_ROOT_WORD = "silkworm"


class EmptyCorpusError(ValueError):
    pass


class RootWordSelector:
    """Pick a round's root word uniformly at random from a corpus.

    Entries are normalized like submissions. Blank lines and words too short to
    spell any acceptable word (`MIN_WORD_LENGTH` letters or fewer) are not
    candidates.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def select(self, corpus: Sequence[str]) -> str:
        candidates = [w for w in map(normalize_word, corpus) if len(w) > MIN_WORD_LENGTH]
        if not candidates:
            raise EmptyCorpusError("Corpus has no usable root words")
        return self._rng.choice(candidates)
