from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol


def normalize_word(raw: str) -> str:
    """Lower-case and trim. Used for submissions, root words and word lists alike."""
    return raw.lower().strip()


class WordChecker(Protocol):
    """Answers "is this a real word in `language`?".

    Implementations must be deterministic for a fixed (word, language) pair.
    """

    def is_valid_word(self, word: str, language: str) -> bool: ...


class WordListDictionary:
    """WordChecker backed by in-memory word lists, one per language code."""

    def __init__(self, words_by_language: Mapping[str, Iterable[str]]) -> None:
        self._words: dict[str, frozenset[str]] = {
            normalize_word(lang): frozenset(w for w in map(normalize_word, words) if w)
            for lang, words in words_by_language.items()
        }

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(sorted(self._words))

    def word_count(self, language: str) -> int:
        return len(self._words.get(normalize_word(language), ()))

    def is_valid_word(self, word: str, language: str) -> bool:
        words = self._words.get(normalize_word(language))
        if not words or not word:
            return False
        return normalize_word(word) in words
