# src/termtodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.input_flow import InputFlow, InputSnapshot
from ..tasks.selection import SelectionController
from ..tasks.task_models import Task
from .ports import TaskRepo


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Everything a presentation layer needs to draw one frame."""

    tasks: tuple[Task, ...]
    selected: int | None
    input: InputSnapshot
    status_message: str | None
    help_lines: tuple[str, ...]

    @property
    def selected_task(self) -> Task | None:
        if self.selected is None:
            return None
        return self.tasks[self.selected]


@dataclass
class AppState:
    # Settings are kept on the state for modules that need paths/names later.
    settings: Any

    store: TaskRepo
    selection: SelectionController
    input_flow: InputFlow

    status_message: str | None = None
    running: bool = True
    help_lines: list[str] = field(default_factory=list)

    @classmethod
    def build(cls, settings: Any, store: TaskRepo) -> AppState:
        return cls(
            settings=settings,
            store=store,
            selection=SelectionController(store),
            input_flow=InputFlow(store),
        )

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            tasks=self.store.tasks,
            selected=self.selection.index,
            input=self.input_flow.snapshot(),
            status_message=self.status_message,
            help_lines=tuple(self.help_lines),
        )
