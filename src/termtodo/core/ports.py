# src/termtodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

InputFlow and the dispatcher depend on these Protocols rather than on TaskStore
directly, so tests can swap in an in-memory repo with controllable save failures.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Ordered task collection with write-through persistence."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: int) -> Task: ...

    @property
    def tasks(self) -> tuple[Task, ...]: ...

    def create(self, title: str, description: str = "") -> bool: ...
    def toggle(self, index: int) -> bool: ...
    def delete(self, index: int) -> Task | None: ...
    def edit(self, index: int, new_title: str, new_description: str) -> bool: ...
