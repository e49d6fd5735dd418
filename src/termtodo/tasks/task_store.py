# src/termtodo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from .persistence import load_tasks, save_tasks
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list, written through to a JSON file.

    Every mutator saves the whole list before returning. When the save fails the
    in-memory change is kept (the session stays usable) and PersistError is
    re-raised to the caller, who decides how to surface it.

    Mutators return False (or None for delete) for no-ops; no-ops never touch disk.
    """

    def __init__(self, path: str | Path, tasks: Iterable[Task] | None = None) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def open(cls, path: str | Path) -> TaskStore:
        store = cls(path, load_tasks(path))
        logger.info("TaskStore ready path=%s total=%s", store.path, len(store))
        return store

    # ---- read surface ----

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Copies of the current tasks; mutating them does not affect the store."""
        return tuple(replace(t) for t in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return replace(self._tasks[index])

    def is_empty(self) -> bool:
        return not self._tasks

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    # ---- persistence ----

    def save(self) -> None:
        save_tasks(self._path, self._tasks)

    # ---- mutators ----

    def create(self, title: str, description: str = "") -> bool:
        if not title.strip():
            logger.debug("Rejected task with empty title.")
            return False
        self._tasks.append(Task(title=title, description=description, done=False))
        logger.info("Created task #%d", len(self._tasks) - 1)
        self.save()
        return True

    def toggle(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        task = self._tasks[index]
        task.done = not task.done
        logger.info("Toggled task #%d done=%s", index, task.done)
        self.save()
        return True

    def delete(self, index: int) -> Task | None:
        if not self._in_range(index):
            return None
        removed = self._tasks.pop(index)
        logger.info("Deleted task #%d (%d left)", index, len(self._tasks))
        self.save()
        return removed

    def edit(self, index: int, new_title: str, new_description: str) -> bool:
        if not self._in_range(index):
            return False
        task = self._tasks[index]
        task.title = new_title
        task.description = new_description
        logger.info("Edited task #%d", index)
        self.save()
        return True
