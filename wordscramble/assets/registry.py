from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from wordscramble.core.dictionary import WordListDictionary, normalize_word

logger = logging.getLogger(__name__)

ROOT_WORDS_FILE = "start.txt"
DICTIONARIES_DIR = "dictionaries"


class AssetLoadError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class WordAssets:
    """Root word corpus plus the dictionaries used by the realness check."""

    root_word_corpus: tuple[str, ...]
    dictionary: WordListDictionary

    def root_words(self) -> tuple[str, ...]:
        """Corpus provider for `GameEngine`."""
        return self.root_word_corpus

    @property
    def languages(self) -> tuple[str, ...]:
        return self.dictionary.languages

    def has_language(self, language: str) -> bool:
        return normalize_word(language) in self.dictionary.languages


def read_word_list(path: Path) -> list[str]:
    """One word per line. Blank lines and `#` comments are skipped."""

    try:
        raw = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise AssetLoadError(f"Asset file not found: {path}") from e

    words: list[str] = []
    for line in raw.splitlines():
        w = normalize_word(line)
        if not w or w.startswith("#"):
            continue
        words.append(w)
    return words


def load_root_words(path: Path) -> tuple[str, ...]:
    # A missing corpus is not fatal; the engine falls back to a fixed root word.
    try:
        words = read_word_list(path)
    except AssetLoadError:
        logger.warning("Root word corpus not found at %s", path)
        return ()
    return tuple(dict.fromkeys(words))


def load_dictionaries(directory: Path) -> WordListDictionary:
    if not directory.is_dir():
        raise AssetLoadError(f"Dictionary directory not found: {directory}")

    by_language: dict[str, list[str]] = {}
    for path in sorted(directory.glob("*.txt")):
        by_language[normalize_word(path.stem)] = read_word_list(path)

    if not by_language:
        raise AssetLoadError(f"No dictionary word lists in {directory}")

    return WordListDictionary(by_language)


def _fallback_dictionary() -> WordListDictionary:
    """Tiny English list so the fallback root word stays playable in dev/CI."""

    words: Iterable[str] = (
        "silk", "silo", "slim", "slow", "soil", "work", "worm", "worms", "milk", "mils",
        "mill", "rim", "rims", "mow", "mows", "owl", "owls", "low", "lows", "row", "rows",
        "sow", "mol", "oil", "oils", "irk", "irks", "ilk", "ski", "sir", "silkworm",
    )
    return WordListDictionary({"en": words})


def load_word_assets(*, root: Path) -> WordAssets:
    assets_dir = root / "assets"

    # Default behavior: fall back to a tiny built-in dictionary when word lists are missing.
    # You can force strict behavior by setting WORDSCRAMBLE_STRICT_ASSETS=1.
    strict = os.getenv("WORDSCRAMBLE_STRICT_ASSETS", "").strip().lower() in {"1", "true", "yes"}

    corpus = load_root_words(assets_dir / ROOT_WORDS_FILE)

    try:
        dictionary = load_dictionaries(assets_dir / DICTIONARIES_DIR)
    except AssetLoadError:
        if strict:
            raise
        logger.warning("No dictionaries under %s; using the built-in fallback", assets_dir)
        dictionary = _fallback_dictionary()

    logger.info(
        "Loaded %d root words and dictionaries for %s from %s",
        len(corpus),
        ",".join(dictionary.languages),
        assets_dir,
    )
    return WordAssets(root_word_corpus=corpus, dictionary=dictionary)
