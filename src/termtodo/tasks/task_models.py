# src/termtodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class InputField(StrEnum):
    """Text field that receives keystrokes while the input modal is open."""

    TITLE = "title"
    DESCRIPTION = "description"

    def other(self) -> InputField:
        return InputField.DESCRIPTION if self is InputField.TITLE else InputField.TITLE


class InputMode(StrEnum):
    """
    Input modal state.

    Notes:
    - INACTIVE means normal browsing; keys go to selection/store commands.
    - the two editing modes map 1:1 onto the active InputField.
    """

    INACTIVE = "inactive"
    EDITING_TITLE = "editing_title"
    EDITING_DESCRIPTION = "editing_description"

    @classmethod
    def for_field(cls, field: InputField) -> InputMode:
        if field is InputField.TITLE:
            return cls.EDITING_TITLE
        return cls.EDITING_DESCRIPTION


@dataclass(slots=True)
class Task:
    """
    One to-do record.

    There is no id: a task is identified by its position in the owning list.
    """

    title: str
    description: str = ""
    done: bool = False

    def to_record(self) -> dict[str, Any]:
        return {"title": self.title, "done": self.done, "description": self.description}

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON record.

        Raises ValueError for anything that is not a well-typed record.
        Missing description/done fall back to defaults; unknown keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"record is {type(raw).__name__}, expected object")
        if "title" not in raw:
            raise ValueError("record has no title")

        title = raw["title"]
        description = raw.get("description", "")
        done = raw.get("done", False)

        if not isinstance(title, str):
            raise ValueError("title must be a string")
        if not isinstance(description, str):
            raise ValueError("description must be a string")
        if not isinstance(done, bool):
            raise ValueError("done must be a boolean")

        return cls(title=title, description=description, done=done)
