from __future__ import annotations

from pathlib import Path

from wordscramble.assets.registry import WordAssets, load_word_assets
from wordscramble.settings import get_settings

_ASSETS: WordAssets | None = None


def init_assets(*, project_root: Path) -> WordAssets:
    """Read the word lists under `project_root` on first call; later calls reuse them."""

    global _ASSETS
    if _ASSETS is None:
        _ASSETS = load_word_assets(root=project_root)
    return _ASSETS


def init_assets_for_app() -> None:
    init_assets(project_root=get_settings().assets_root)


def reset_assets_for_tests() -> None:
    # Lets a test suite reload word lists from its own fixture root.
    global _ASSETS
    _ASSETS = None


def get_assets() -> WordAssets:
    if _ASSETS is None:
        raise RuntimeError("Word lists not loaded; the app lifespan calls init_assets_for_app()")
    return _ASSETS
