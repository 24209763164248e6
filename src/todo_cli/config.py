# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every variable is optional; defaults give the plain behavior
  (todos.json in the working directory, warnings on the console).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Storage ----
    storage_backend: str
    todos_file: str
    data_dir: Path | None  # None -> process working directory

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/todo")) or Path(".local/todo"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            storage_backend=_env(_k("STORAGE"), "json").lower(),
            todos_file=_env(_k("FILE"), "todos.json"),
            data_dir=_env_path(_k("DATA_DIR"), None),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
