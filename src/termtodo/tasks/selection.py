# src/termtodo/tasks/selection.py

from __future__ import annotations

from collections.abc import Sized


class SelectionController:
    """
    Optional cursor into a list (position-based).

    Invariant: `index` is either None or a valid position in `items`.
    Movement clamps at both ends; there is no wraparound.
    """

    def __init__(self, items: Sized) -> None:
        self._items = items
        self.index: int | None = None

    def _len(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self.index = None

    def select(self, index: int) -> None:
        if 0 <= index < self._len():
            self.index = index

    def next(self) -> None:
        n = self._len()
        if n == 0:
            return
        if self.index is None:
            self.index = 0
        else:
            self.index = min(self.index + 1, n - 1)

    def previous(self) -> None:
        n = self._len()
        if n == 0:
            return
        if self.index is None:
            self.index = 0
        else:
            self.index = max(self.index - 1, 0)

    def first(self) -> None:
        if self._len():
            self.index = 0

    def last(self) -> None:
        n = self._len()
        if n:
            self.index = n - 1

    def reconcile_after_delete(self, removed_index: int) -> None:
        """Call after the item at `removed_index` was removed from `items`."""
        if self.index is None:
            return
        n = self._len()
        if n == 0:
            self.index = None
            return
        if self.index == removed_index:
            self.index = min(removed_index, n - 1)
        elif self.index > removed_index:
            self.index -= 1
        self.validate()

    def validate(self) -> None:
        """Clamp a stale index after the list shrank outside our control."""
        if self.index is None:
            return
        n = self._len()
        if n == 0:
            self.index = None
        elif self.index >= n:
            self.index = n - 1
        elif self.index < 0:
            self.index = 0
