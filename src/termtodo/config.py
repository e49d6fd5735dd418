# src/termtodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app, built by an explicit call at startup.
- Per-user defaults under the XDG config directory.
- Every path can be overridden with a TERMTODO_* variable.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TERMTODO"
APP_DIR_NAME = "termtodo"
TASKS_FILE_NAME = "tasks.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


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


def default_config_dir() -> Path:
    base = os.getenv("XDG_CONFIG_HOME")
    if base and base.strip():
        return Path(base).expanduser() / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_console: bool

    # ---- Local data paths ----
    config_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "termtodo").strip() or "termtodo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        # stderr output would be drawn over the curses screen.
        log_to_console = _env_bool(_k("LOG_TO_CONSOLE"), False)

        config_dir = _env_path(_k("CONFIG_DIR"), default_config_dir())
        tasks_path = _env_path(_k("TASKS_PATH"), config_dir / TASKS_FILE_NAME)
        log_dir = _env_path(_k("LOG_DIR"), config_dir / "logs")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_console=log_to_console,
            config_dir=config_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    load_dotenv(override=False)
    return Settings.from_env()
