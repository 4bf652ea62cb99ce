"""Play a game in the terminal against the packaged word lists.

Usage:
    uv run python scripts/play.py

Honors WORDSCRAMBLE_LANGUAGE / WORDSCRAMBLE_ASSETS_ROOT like the API does.
"""

from __future__ import annotations

import logging

from wordscramble.assets.registry import load_word_assets
from wordscramble.play import QUIT_COMMAND, RESTART_COMMAND, make_engine, play
from wordscramble.settings import get_settings


def _read_line() -> str | None:
    try:
        return input("> ")
    except EOFError:
        return None


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    assets = load_word_assets(root=settings.assets_root)
    engine = make_engine(assets=assets, language=settings.language)

    print(f"Make words from the root word. {RESTART_COMMAND} for a new word, {QUIT_COMMAND} to leave.")
    score = play(engine=engine, read_line=_read_line, write=print)
    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
