# src/termtodo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.state import AppState
from ..errors import PersistError

CommandHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)


class Key(StrEnum):
    """Named non-printable keys. Printable keys are passed as 1-char strings."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESCAPE = "escape"


def _label(key: str) -> str:
    if key == " ":
        return "Space"
    if len(key) == 1:
        return key
    return key.capitalize()


class KeyRegistry:
    """
    Key -> command lookup used while browsing.

    While the input modal is open every key is routed to the modal instead, so
    navigation and store commands are suppressed.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[list[str], str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        keys: list[str],
    ) -> None:
        for key in keys:
            self._handlers[str(key)] = handler
        self._help[name] = ([str(k) for k in keys], help_text)

    def handle(self, state: AppState, key: str) -> bool:
        """
        Process one key event. Returns False once the app should stop.

        PersistError from any command is reported on `state.status_message`;
        the in-memory state stays authoritative and the session continues.
        """
        state.status_message = None
        try:
            if state.input_flow.is_active:
                _handle_modal_key(state, key)
            else:
                handler = self._handlers.get(key)
                if handler is None:
                    logger.debug("Unbound key %r", key)
                else:
                    handler(state)
        except PersistError as e:
            logger.warning("Changes kept in memory only: %s", e)
            state.status_message = f"Warning: could not save ({e.cause or e}). Changes kept in memory."
        return state.running

    def build_help(self) -> list[str]:
        lines: list[str] = []
        for _name, (keys, help_text) in self._help.items():
            lines.append(f"{'/'.join(_label(k) for k in keys)} {help_text}")
        return lines


def _handle_modal_key(state: AppState, key: str) -> None:
    flow = state.input_flow
    if key == Key.ESCAPE:
        logger.debug("Input modal closed: %s", flow.cancel())
    elif key == Key.ENTER:
        before = len(state.store)
        try:
            logger.debug("Input modal closed: %s", flow.confirm())
        finally:
            # Select a freshly created task even if its save failed.
            if len(state.store) > before:
                state.selection.last()
    elif key == Key.TAB:
        flow.switch_field()
    elif key == Key.BACKSPACE:
        flow.backspace()
    elif len(key) == 1 and key.isprintable():
        flow.insert(key)
    else:
        logger.debug("Ignored key %r in input mode", key)


registry = KeyRegistry()


# ---- normal-mode commands ----


def cmd_quit(state: AppState) -> None:
    logger.info("Quit requested.")
    state.running = False


def cmd_select_none(state: AppState) -> None:
    state.selection.clear()


def cmd_next(state: AppState) -> None:
    state.selection.next()


def cmd_previous(state: AppState) -> None:
    state.selection.previous()


def cmd_first(state: AppState) -> None:
    state.selection.first()


def cmd_last(state: AppState) -> None:
    state.selection.last()


def cmd_toggle(state: AppState) -> None:
    index = state.selection.index
    if index is None:
        return
    state.store.toggle(index)


def cmd_delete(state: AppState) -> None:
    index = state.selection.index
    if index is None:
        return
    try:
        state.store.delete(index)
    finally:
        # The task is gone from memory even when the save failed.
        state.selection.reconcile_after_delete(index)


def cmd_add(state: AppState) -> None:
    state.input_flow.open_add()


def cmd_edit(state: AppState) -> None:
    index = state.selection.index
    if index is None:
        return
    state.input_flow.open_edit(index, state.store[index])


def register_default_commands(reg: KeyRegistry) -> None:
    reg.register("quit", cmd_quit, "quit", ["q"])
    reg.register("none", cmd_select_none, "deselect", [Key.ESCAPE])
    reg.register("next", cmd_next, "down", ["j", Key.DOWN])
    reg.register("previous", cmd_previous, "up", ["k", Key.UP])
    reg.register("first", cmd_first, "first", ["g", Key.HOME])
    reg.register("last", cmd_last, "last", ["G", Key.END])
    reg.register("toggle", cmd_toggle, "toggle done", [" ", Key.ENTER])
    reg.register("delete", cmd_delete, "delete", ["d", Key.DELETE])
    reg.register("add", cmd_add, "add", ["a"])
    reg.register("edit", cmd_edit, "edit", ["e"])


register_default_commands(registry)
