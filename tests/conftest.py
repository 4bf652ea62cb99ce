from __future__ import annotations

import os
import random
from collections.abc import Callable, Generator, Iterable, Sequence
from pathlib import Path

import pytest

from wordscramble.core.engine import GameEngine


class FakeDictionary:
    """Deterministic WordChecker for tests; knows one language."""

    def __init__(self, words: Iterable[str], *, language: str = "en") -> None:
        self.words = {w.lower() for w in words}
        self.language = language
        self.calls: list[tuple[str, str]] = []

    def is_valid_word(self, word: str, language: str) -> bool:
        self.calls.append((word, language))
        return language == self.language and word in self.words


SILKWORM_WORDS = ("silk", "worm", "worms", "milk", "slim", "rim", "owl", "row", "ski", "sir", "is", "or", "mirror")


@pytest.fixture(scope="session", autouse=True)
def _init_assets_from_test_fixtures() -> None:
    """Initialize assets from `tests/assets` and forbid the built-in fallback.

    This keeps tests hermetic and independent of the repo's real word lists.
    """

    os.environ["WORDSCRAMBLE_STRICT_ASSETS"] = "1"

    from wordscramble.assets.startup import init_assets, reset_assets_for_tests

    reset_assets_for_tests()

    # Point the asset loader at a fake project root: tests/ contains an assets/ dir.
    test_root = Path(__file__).resolve().parent
    init_assets(project_root=test_root)


@pytest.fixture()
def dictionary() -> FakeDictionary:
    return FakeDictionary(SILKWORM_WORDS)


@pytest.fixture()
def make_engine(dictionary: FakeDictionary) -> Callable[..., GameEngine]:
    def _make(corpus: Sequence[str] = ("silkworm",), *, seed: int = 7, **kwargs: object) -> GameEngine:
        return GameEngine(
            corpus=lambda: corpus,
            dictionary=kwargs.pop("dictionary", dictionary),  # type: ignore[arg-type]
            rng=random.Random(seed),
            **kwargs,  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture()
def engine(make_engine: Callable[..., GameEngine]) -> GameEngine:
    e = make_engine()
    e.start_game()
    return e


@pytest.fixture()
def client_and_redis():
    """FastAPI TestClient wired to a fakeredis instance."""

    import fakeredis
    from fastapi.testclient import TestClient

    from wordscramble.api.deps import get_redis
    from wordscramble.main import app

    r = fakeredis.FakeRedis(decode_responses=True)

    def _override() -> Generator[fakeredis.FakeRedis, None, None]:
        yield r

    app.dependency_overrides[get_redis] = _override
    with TestClient(app) as c:
        yield c, r
    app.dependency_overrides.clear()
