# tests/test_curses_connector.py

from __future__ import annotations

import curses

import pytest

from termtodo.cli.commands import Key
from termtodo.connectors.curses_connector import _wrap, translate_key


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a", "a"),
        (" ", " "),
        ("é", "é"),
        ("\n", Key.ENTER),
        ("\r", Key.ENTER),
        ("\t", Key.TAB),
        ("\x1b", Key.ESCAPE),
        ("\x7f", Key.BACKSPACE),
        (curses.KEY_BACKSPACE, Key.BACKSPACE),
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DC, Key.DELETE),
        (curses.KEY_END, Key.END),
        ("\x01", None),
        (curses.KEY_F1, None),
    ],
)
def test_translate_key(raw, expected) -> None:
    assert translate_key(raw) == expected


def test_wrap_breaks_on_words_and_long_tokens() -> None:
    assert _wrap("one two three", 7) == ["one two", "three"]
    assert _wrap("abcdefghij", 4) == ["abcd", "efgh", "ij"]
    assert _wrap("first\nsecond", 20) == ["first", "second"]
    assert _wrap("", 5) == [""]


def test_wrap_keeps_blank_paragraphs() -> None:
    assert _wrap("a\n\nb", 10) == ["a", "", "b"]
    assert _wrap("text", 0) == []
