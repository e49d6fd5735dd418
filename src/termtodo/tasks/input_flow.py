# src/termtodo/tasks/input_flow.py

"""
Modal text entry for new (and edited) tasks.

States: INACTIVE -> EDITING_TITLE <-> EDITING_DESCRIPTION -> INACTIVE.
Buffers live only while the modal is open; both confirm and cancel discard them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import TaskRepo
from .task_models import InputField, InputMode, Task

logger = logging.getLogger(__name__)


class InputOutcome(StrEnum):
    CREATED = "created"
    EDITED = "edited"
    CANCELLED = "cancelled"
    IGNORED = "ignored"  # confirm/cancel while inactive


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    mode: InputMode
    active_field: InputField | None
    title_text: str
    description_text: str
    target_index: int | None


class InputFlow:
    def __init__(self, store: TaskRepo) -> None:
        self._store = store
        self.mode = InputMode.INACTIVE
        self.active_field = InputField.TITLE
        self.title_text = ""
        self.description_text = ""
        self.target_index: int | None = None

    @property
    def is_active(self) -> bool:
        return self.mode is not InputMode.INACTIVE

    def _reset(self) -> None:
        self.mode = InputMode.INACTIVE
        self.active_field = InputField.TITLE
        self.title_text = ""
        self.description_text = ""
        self.target_index = None

    def _open(self, title: str, description: str, target_index: int | None) -> None:
        self.active_field = InputField.TITLE
        self.mode = InputMode.EDITING_TITLE
        self.title_text = title
        self.description_text = description
        self.target_index = target_index

    # ---- transitions ----

    def open_add(self) -> None:
        if self.is_active:
            return
        self._open("", "", None)

    def open_edit(self, index: int, task: Task) -> None:
        if self.is_active:
            return
        self._open(task.title, task.description, index)

    def switch_field(self) -> None:
        if not self.is_active:
            return
        self.active_field = self.active_field.other()
        self.mode = InputMode.for_field(self.active_field)

    def insert(self, text: str) -> None:
        if not self.is_active or not text:
            return
        if self.active_field is InputField.TITLE:
            self.title_text += text
        else:
            self.description_text += text

    def backspace(self) -> None:
        if not self.is_active:
            return
        if self.active_field is InputField.TITLE:
            self.title_text = self.title_text[:-1]
        else:
            self.description_text = self.description_text[:-1]

    def cancel(self) -> InputOutcome:
        if not self.is_active:
            return InputOutcome.IGNORED
        self._reset()
        return InputOutcome.CANCELLED

    def confirm(self) -> InputOutcome:
        """
        Commit the buffers to the store and close the modal.

        An empty title (after trim) cancels instead, whichever field has focus.
        The modal is closed even if the store raises PersistError.
        """
        if not self.is_active:
            return InputOutcome.IGNORED
        if not self.title_text.strip():
            logger.debug("Empty title on confirm; cancelling input.")
            return self.cancel()

        title, description, target = self.title_text, self.description_text, self.target_index
        self._reset()

        if target is None:
            self._store.create(title, description)
            return InputOutcome.CREATED
        self._store.edit(target, title, description)
        return InputOutcome.EDITED

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            mode=self.mode,
            active_field=self.active_field if self.is_active else None,
            title_text=self.title_text,
            description_text=self.description_text,
            target_index=self.target_index,
        )
