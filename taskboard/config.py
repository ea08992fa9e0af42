# taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole process, built lazily by get_settings().
- No connection string is required at import time; a missing one fails at first use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Persistence ----
    database_url: Optional[str]

    # ---- Web process ----
    host: str
    port: int

    # ---- UI client ----
    api_url: str

    # ---- Logging ----
    log_level: str
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        # Connection string: project-prefixed name first, then the conventional DATABASE_URL.
        database_url = _first_env(_k("DATABASE_URL"), "DATABASE_URL", default=None)

        host = _env(_k("HOST"), "127.0.0.1")
        port = _env_int(_k("PORT"), 8000)
        api_url = _env(_k("API_URL"), f"http://{host}:{port}").rstrip("/")

        log_level = _env(_k("LOG_LEVEL"), "INFO").upper()
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/taskboard"))

        return Settings(
            database_url=database_url.strip() if database_url else None,
            host=host,
            port=port,
            api_url=api_url,
            log_level=log_level,
            log_dir=log_dir,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
