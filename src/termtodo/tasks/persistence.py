# src/termtodo/tasks/persistence.py

"""
Load/save boundary between the in-memory task list and the JSON file on disk.

- load never fails: missing or malformed files yield an empty list (and a log line),
- save writes a sibling temp file, fsyncs it, then os.replace()s it over the target,
  so an interrupted write leaves the previous file intact,
- no copy of the list is kept here between calls.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import LoadError, PersistError
from .task_models import Task

logger = logging.getLogger(__name__)

CORRUPT_SUFFIX = ".corrupt"


def ensure_storage(path: str | Path) -> Path:
    """Create the parent directory of the task file (idempotent)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _decode(path: Path, raw: bytes) -> list[Task]:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(path, f"not valid UTF-8 ({e})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise LoadError(path, f"top level is {type(data).__name__}, expected array")

    tasks: list[Task] = []
    for pos, record in enumerate(data):
        try:
            tasks.append(Task.from_record(record))
        except ValueError as e:
            raise LoadError(path, f"record {pos}: {e}") from e
    return tasks


def _quarantine(path: Path) -> None:
    """Move a malformed file aside so the next save does not destroy its content."""
    target = path.with_name(path.name + CORRUPT_SUFFIX)
    try:
        os.replace(path, target)
        logger.warning("Moved unreadable task file to %s", target)
    except OSError:
        logger.warning("Could not move unreadable task file %s aside", path, exc_info=True)


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read the task list from `path`.

    Returns an empty list when the file is missing, unreadable or malformed.
    """
    path = Path(path)
    try:
        ensure_storage(path)
    except OSError:
        logger.warning("Could not create task directory %s", path.parent, exc_info=True)

    if not path.exists():
        logger.info("No task file at %s, starting with an empty list.", path)
        return []

    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("Task file %s is unreadable (%s); starting empty.", path, e)
        return []

    try:
        tasks = _decode(path, raw)
    except LoadError as e:
        logger.warning("Discarding task file content: %s", e)
        _quarantine(path)
        return []

    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """
    Persist the full list to `path` atomically.

    Raises PersistError on any write/serialization failure.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        ensure_storage(path)
        payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except (OSError, TypeError, ValueError) as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        logger.error("Failed to save tasks to %s: %s", path, e)
        raise PersistError(path, e) from e

    logger.debug("Saved tasks to %s", path)
