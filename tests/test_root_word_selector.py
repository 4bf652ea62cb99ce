from __future__ import annotations

import random

import pytest

from wordscramble.core.selector import EmptyCorpusError, RootWordSelector


def test_select_returns_a_corpus_word() -> None:
    corpus = ["silkworm", "baseball", "airplane"]
    sel = RootWordSelector(random.Random(1))

    for _ in range(20):
        assert sel.select(corpus) in corpus


def test_select_is_reproducible_with_same_seed() -> None:
    corpus = [f"word{i}" for i in range(50)]

    a = [RootWordSelector(random.Random(42)).select(corpus) for _ in range(3)]
    b = [RootWordSelector(random.Random(42)).select(corpus) for _ in range(3)]

    assert a == b


def test_select_draws_again_on_every_call() -> None:
    corpus = [f"word{i}" for i in range(50)]
    sel = RootWordSelector(random.Random(3))

    picks = {sel.select(corpus) for _ in range(30)}

    # No caching of the previous pick.
    assert len(picks) > 1


def test_select_covers_whole_corpus() -> None:
    corpus = ["alpha", "bravo", "charlie"]
    sel = RootWordSelector(random.Random(0))

    seen = {sel.select(corpus) for _ in range(200)}

    assert seen == set(corpus)


def test_select_normalizes_and_skips_blank_lines() -> None:
    sel = RootWordSelector(random.Random(0))

    # Mirrors a word-list file split on newlines with a trailing empty line.
    assert sel.select(["", "  Silkworm \n", "   "]) == "silkworm"


@pytest.mark.parametrize("corpus", [[], [""], ["  ", "\n"]])
def test_select_empty_corpus_raises(corpus: list[str]) -> None:
    with pytest.raises(EmptyCorpusError):
        RootWordSelector(random.Random(0)).select(corpus)


def test_empty_corpus_error_is_a_value_error() -> None:
    assert issubclass(EmptyCorpusError, ValueError)


def test_select_never_picks_a_word_too_short_to_play() -> None:
    corpus = ["a", "ox", "silkworm"]

    picks = {RootWordSelector(random.Random(s)).select(corpus) for s in range(30)}

    assert picks == {"silkworm"}


@pytest.mark.parametrize("corpus", [["a"], ["a", "ox", " I "]])
def test_select_only_short_words_raises(corpus: list[str]) -> None:
    with pytest.raises(EmptyCorpusError):
        RootWordSelector(random.Random(0)).select(corpus)
