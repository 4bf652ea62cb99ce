from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# project root is one level up from this file: wordscramble/settings.py
PROJECT_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class Settings:
    redis_url: str
    language: str
    assets_root: Path
    game_ttl_s: int
    log_level: str


def settings_from_env() -> Settings:
    return Settings(
        redis_url=os.environ.get("REDIS_URL", "redis://localhost:6379/0"),
        language=os.environ.get("WORDSCRAMBLE_LANGUAGE", "en").strip().lower() or "en",
        assets_root=Path(os.environ.get("WORDSCRAMBLE_ASSETS_ROOT", str(PROJECT_ROOT))),
        game_ttl_s=int(os.environ.get("WORDSCRAMBLE_GAME_TTL_S", "86400")),
        log_level=os.environ.get("WORDSCRAMBLE_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real environment variables win over .env entries.
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    return settings_from_env()
