# src/termtodo/errors.py

from __future__ import annotations

from pathlib import Path


class TermtodoError(Exception):
    """Base class for errors raised by termtodo."""


class LoadError(TermtodoError):
    """
    The task file could not be read or decoded.

    Never escapes load_tasks(): it is recovered there by returning an empty list.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class PersistError(TermtodoError):
    """Writing the task file failed (disk full, permission denied, ...)."""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to save tasks to {path}{detail}")
        self.path = Path(path)
        self.cause = cause
