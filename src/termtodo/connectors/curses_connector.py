# src/termtodo/connectors/curses_connector.py

"""
Curses front-end: draws a RenderSnapshot and feeds key names to the registry.

Layout:
- left panel (30%): task list, selected row highlighted
- right panel: details of the selected task
- footer: status warning or key help
- centered box while the input modal is open
"""

from __future__ import annotations

import curses
import logging
import textwrap

from ..cli.commands import Key
from ..cli.commands import registry as key_registry
from ..core.state import AppState, RenderSnapshot
from ..tasks.task_models import InputField, InputMode

logger = logging.getLogger(__name__)

LIST_WIDTH_PERCENT = 30

LIST_COLOR = 1
DETAIL_COLOR = 2
SELECTED_ROW_COLOR = 3
DONE_COLOR = 4
WARNING_COLOR = 5
DIALOG_BG_COLOR = 6

_SPECIAL_KEYS: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,
}

_CONTROL_CHARS: dict[str, Key] = {
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\t": Key.TAB,
    "\x1b": Key.ESCAPE,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def translate_key(raw: int | str) -> str | None:
    """Map a get_wch() result to a registry key name (None = ignore)."""
    if isinstance(raw, str):
        if raw in _CONTROL_CHARS:
            return _CONTROL_CHARS[raw]
        if len(raw) == 1 and raw.isprintable():
            return raw
        return None
    return _SPECIAL_KEYS.get(raw)


class CursesView:
    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        self._init_curses()

    def _init_curses(self) -> None:
        curses.curs_set(0)
        self.stdscr.keypad(True)
        # Escape is a command here; don't wait for a possible escape sequence.
        curses.set_escdelay(25)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(LIST_COLOR, curses.COLOR_YELLOW, -1)
            curses.init_pair(DETAIL_COLOR, curses.COLOR_GREEN, -1)
            curses.init_pair(SELECTED_ROW_COLOR, curses.COLOR_BLACK, curses.COLOR_CYAN)
            curses.init_pair(DONE_COLOR, curses.COLOR_WHITE, -1)
            curses.init_pair(WARNING_COLOR, curses.COLOR_RED, -1)
            curses.init_pair(DIALOG_BG_COLOR, curses.COLOR_WHITE, curses.COLOR_BLUE)

    @staticmethod
    def _attr(pair: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else 0

    def _safe_addnstr(self, y: int, x: int, text: str, n: int, attr: int = 0) -> None:
        if n <= 0:
            return
        try:
            self.stdscr.addnstr(y, x, text, n, attr)
        except curses.error:
            # Writing the bottom-right cell raises even though it succeeds.
            pass

    def _box(self, top: int, left: int, height: int, width: int, title: str, attr: int) -> None:
        if height < 2 or width < 2:
            return
        try:
            win = self.stdscr.derwin(height, width, top, left)
            win.attron(attr)
            win.box()
            win.attroff(attr)
        except curses.error:
            return
        self._safe_addnstr(top, left + 2, f" {title} ", width - 4, attr | curses.A_BOLD)

    # ---- frame ----

    def draw(self, snap: RenderSnapshot) -> None:
        self.stdscr.erase()
        max_y, max_x = self.stdscr.getmaxyx()
        body_h = max_y - 1
        list_w = max(10, (max_x * LIST_WIDTH_PERCENT) // 100)

        self._draw_list(snap, 0, 0, body_h, list_w)
        self._draw_detail(snap, 0, list_w, body_h, max_x - list_w)
        self._draw_footer(snap, max_y - 1, max_x)

        if snap.input.mode is not InputMode.INACTIVE:
            self._draw_dialog(snap, body_h, max_x)
        else:
            curses.curs_set(0)

        self.stdscr.refresh()

    def _draw_list(self, snap: RenderSnapshot, top: int, left: int, height: int, width: int) -> None:
        self._box(top, left, height, width, f"Tasks ({len(snap.tasks)})", self._attr(LIST_COLOR))
        inner_w = width - 2
        rows = height - 2
        if not snap.tasks:
            self._safe_addnstr(top + 1, left + 1, "(no tasks, press a)", inner_w, curses.A_DIM)
            return

        # Keep the selected row visible.
        offset = 0
        if snap.selected is not None and snap.selected >= rows:
            offset = snap.selected - rows + 1

        for row, idx in enumerate(range(offset, min(len(snap.tasks), offset + rows))):
            task = snap.tasks[idx]
            mark = "[x]" if task.done else "[ ]"
            line = f"{mark} {task.title}".ljust(inner_w)
            attr = self._attr(DONE_COLOR) | curses.A_DIM if task.done else 0
            if idx == snap.selected:
                attr = self._attr(SELECTED_ROW_COLOR) | curses.A_BOLD
            self._safe_addnstr(top + 1 + row, left + 1, line, inner_w, attr)

    def _draw_detail(self, snap: RenderSnapshot, top: int, left: int, height: int, width: int) -> None:
        self._box(top, left, height, width, "Details", self._attr(DETAIL_COLOR))
        inner_w = width - 2
        task = snap.selected_task
        if task is None:
            self._safe_addnstr(top + 1, left + 1, "Nothing selected.", inner_w, curses.A_DIM)
            return

        lines = [
            task.title,
            "Status: done" if task.done else "Status: open",
            "",
        ]
        lines.extend(_wrap(task.description or "(no description)", inner_w))
        for row, line in enumerate(lines[: height - 2]):
            attr = curses.A_BOLD if row == 0 else 0
            self._safe_addnstr(top + 1 + row, left + 1, line, inner_w, attr)

    def _draw_footer(self, snap: RenderSnapshot, y: int, max_x: int) -> None:
        if snap.status_message:
            self._safe_addnstr(y, 0, snap.status_message.ljust(max_x), max_x - 1, self._attr(WARNING_COLOR))
            return
        if snap.input.mode is not InputMode.INACTIVE:
            hint = "Tab switch field | Enter save | Esc cancel"
        else:
            hint = " | ".join(snap.help_lines)
        self._safe_addnstr(y, 0, hint.ljust(max_x), max_x - 1, curses.A_DIM)

    def _draw_dialog(self, snap: RenderSnapshot, body_h: int, max_x: int) -> None:
        inp = snap.input
        box_w = min(70, max_x - 4)
        box_h = 6
        top = max(0, (body_h - box_h) // 2)
        left = max(0, (max_x - box_w) // 2)
        attr = self._attr(DIALOG_BG_COLOR)
        title = "New task" if inp.target_index is None else "Edit task"

        for row in range(box_h):
            self._safe_addnstr(top + row, left, " " * box_w, box_w, attr)
        self._box(top, left, box_h, box_w, title, attr)

        fields = [
            (InputField.TITLE, "Title", inp.title_text),
            (InputField.DESCRIPTION, "Description", inp.description_text),
        ]
        cursor: tuple[int, int] | None = None
        for i, (field, label, text) in enumerate(fields):
            active = field is inp.active_field
            prefix = f"{'>' if active else ' '} {label}: "
            room = box_w - 2 - len(prefix)
            # Show the tail of long buffers so the insertion point stays visible.
            visible = text[-room:] if room > 0 and len(text) > room else text
            y = top + 2 + i
            self._safe_addnstr(y, left + 1, prefix + visible, box_w - 2, attr | (curses.A_BOLD if active else 0))
            if active:
                cursor = (y, min(left + 1 + len(prefix) + len(visible), left + box_w - 2))

        if cursor is not None:
            try:
                curses.curs_set(1)
                self.stdscr.move(*cursor)
            except curses.error:
                logger.debug("Cursor placement failed.", exc_info=True)


def _wrap(text: str, width: int) -> list[str]:
    if width <= 0:
        return []
    out: list[str] = []
    for para in text.splitlines() or [""]:
        out.extend(textwrap.wrap(para, width) or [""])
    return out


def _main(stdscr: curses.window, state: AppState) -> None:
    view = CursesView(stdscr)
    logger.info("Curses front-end started.")

    while state.running:
        view.draw(state.snapshot())
        try:
            raw = stdscr.get_wch()
        except curses.error:
            continue

        if raw == curses.KEY_RESIZE:
            continue
        key = translate_key(raw)
        if key is None:
            continue

        try:
            key_registry.handle(state, key)
        except Exception:
            logger.exception("Key handler crashed (key=%r).", key)
            state.status_message = "Internal error while handling a key. See the log file."

    logger.info("Curses front-end finished.")


def run_curses_loop(state: AppState) -> None:
    curses.wrapper(_main, state)
