from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wordscramble.api.models import GameState
from wordscramble.core.dictionary import WordChecker
from wordscramble.core.outcomes import RejectionReason

MIN_WORD_LENGTH = 2


class SubmissionRejected(Exception):
    """Raised by a check; caught by the engine and turned into a `Rejected` outcome."""

    def __init__(self, reason: RejectionReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


def can_spell(word: str, letters: str) -> bool:
    """True if `word` can be built from `letters`, each letter used at most once."""

    remaining = list(letters)
    for ch in word:
        try:
            remaining.remove(ch)
        except ValueError:
            return False
    return True


class SubmissionCheck(ABC):
    """One rule a normalized candidate word must pass."""

    @abstractmethod
    def check(self, *, word: str, state: GameState) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class OriginalityCheck(SubmissionCheck):
    def check(self, *, word: str, state: GameState) -> None:
        if word in state.used_words:
            raise SubmissionRejected(RejectionReason.duplicate_word)


@dataclass(frozen=True, slots=True)
class PossibilityCheck(SubmissionCheck):
    def check(self, *, word: str, state: GameState) -> None:
        if not can_spell(word, state.root_word):
            raise SubmissionRejected(RejectionReason.letters_not_available)


@dataclass(frozen=True, slots=True)
class RealnessCheck(SubmissionCheck):
    dictionary: WordChecker

    def check(self, *, word: str, state: GameState) -> None:
        if not self.dictionary.is_valid_word(word, state.language):
            raise SubmissionRejected(RejectionReason.not_a_real_word)


@dataclass(frozen=True, slots=True)
class LengthCheck(SubmissionCheck):
    # Strictly longer than this.
    min_length: int = MIN_WORD_LENGTH

    def check(self, *, word: str, state: GameState) -> None:
        if not len(word) > self.min_length:
            raise SubmissionRejected(RejectionReason.too_short)


@dataclass(frozen=True, slots=True)
class CheckPipeline:
    checks: tuple[SubmissionCheck, ...]

    def check(self, *, word: str, state: GameState) -> None:
        # Order decides which reason the player sees when several checks fail.
        for c in self.checks:
            c.check(word=word, state=state)


def default_pipeline(*, dictionary: WordChecker) -> CheckPipeline:
    return CheckPipeline(
        checks=(
            OriginalityCheck(),
            PossibilityCheck(),
            RealnessCheck(dictionary=dictionary),
            LengthCheck(),
        )
    )
