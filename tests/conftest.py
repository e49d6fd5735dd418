# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from termtodo.cli.commands import registry
from termtodo.core.state import AppState
from termtodo.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    config_dir = tmp_path / "config" / "termtodo"
    return SimpleNamespace(
        app_name="termtodo-test",
        log_level="DEBUG",
        log_to_console=False,
        config_dir=config_dir,
        tasks_path=config_dir / "tasks.json",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore.open(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired to a real TaskStore under tmp_path.

    NOTE: the real JSON file is used on purpose; the disk contents after each
    key are part of what we want to test.
    """
    st = AppState.build(settings, store)
    st.help_lines = registry.build_help()
    return st


@pytest.fixture()
def fake_state(settings: SimpleNamespace) -> AppState:
    """AppState over an in-memory repo whose saves can be made to fail."""
    return AppState.build(settings, FakeTaskRepo())
