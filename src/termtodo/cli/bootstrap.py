# src/termtodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the per-user config directory exists (idempotent),
- loads the task file and wires TaskStore/selection/input flow into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.persistence import ensure_storage
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    try:
        settings.config_dir.mkdir(parents=True, exist_ok=True)
        ensure_storage(settings.tasks_path)
    except OSError:
        # Tasks stay in memory; every save then reports PersistError to the UI.
        logger.warning("Could not create config directory %s", settings.config_dir, exc_info=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState.build(settings, TaskStore.open(settings.tasks_path))
    state.help_lines = registry.build_help()
    return state
