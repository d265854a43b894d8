# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app; nothing is read at import time except
the environment itself.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKLIST"

BACKENDS = ("json", "sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    backend: str
    store_path: Path

    # ---- Behaviour ----
    confirm_clear: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        backend = _env(_k("BACKEND"), "json").strip().lower()
        if backend not in BACKENDS:
            backend = "json"

        default_name = "tasks.sqlite3" if backend == "sqlite" else "tasks.json"
        store_path = _env_path(_k("STORE_PATH"), data_dir / default_name)

        confirm_clear = _env_bool(_k("CONFIRM_CLEAR"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            backend=backend,
            store_path=store_path,
            confirm_clear=confirm_clear,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
