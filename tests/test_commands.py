# tests/test_commands.py

from __future__ import annotations

import json

from termtodo.cli.commands import Key, KeyRegistry, registry
from termtodo.core.state import AppState
from termtodo.tasks.task_models import InputField, InputMode, Task


def _press(state: AppState, *keys: str) -> None:
    for key in keys:
        registry.handle(state, key)


def _type(state: AppState, text: str) -> None:
    _press(state, *text)


def _on_disk(state: AppState) -> list[dict]:
    return json.loads(state.store.path.read_text("utf-8"))


def test_end_to_end_add_toggle_delete(state: AppState) -> None:
    assert state.store.tasks == ()

    _press(state, "a")
    _type(state, "Buy milk")
    _press(state, Key.TAB)
    _type(state, "2%")
    _press(state, Key.ENTER)

    assert state.store.tasks == (Task(title="Buy milk", description="2%", done=False),)
    assert _on_disk(state) == [{"title": "Buy milk", "done": False, "description": "2%"}]
    assert state.input_flow.mode is InputMode.INACTIVE
    assert state.selection.index == 0

    _press(state, " ")
    assert state.store[0].done is True
    assert _on_disk(state)[0]["done"] is True

    _press(state, "d")
    assert state.store.tasks == ()
    assert _on_disk(state) == []
    assert state.selection.index is None


def test_navigation_keys(state: AppState) -> None:
    for title in ("a", "b", "c"):
        state.store.create(title)

    _press(state, "j")
    assert state.selection.index == 0
    _press(state, Key.DOWN, "j", "j")
    assert state.selection.index == 2
    _press(state, "k")
    assert state.selection.index == 1
    _press(state, "g")
    assert state.selection.index == 0
    _press(state, Key.END)
    assert state.selection.index == 2
    _press(state, Key.HOME)
    assert state.selection.index == 0
    _press(state, "G")
    assert state.selection.index == 2
    _press(state, Key.ESCAPE)
    assert state.selection.index is None


def test_toggle_and_delete_need_a_selection(state: AppState) -> None:
    state.store.create("a")
    before = state.store.path.read_text("utf-8")

    _press(state, " ", Key.ENTER, "d", Key.DELETE, "e")

    assert state.store.tasks == (Task(title="a"),)
    assert state.store.path.read_text("utf-8") == before
    assert state.input_flow.mode is InputMode.INACTIVE


def test_deleting_last_of_three_selects_new_last(state: AppState) -> None:
    for title in ("a", "b", "c"):
        state.store.create(title)
    _press(state, "G", "d")

    assert [t.title for t in state.store.tasks] == ["a", "b"]
    assert state.selection.index == 1


def test_modal_swallows_navigation_keys(state: AppState) -> None:
    state.store.create("existing")
    _press(state, "j", "a")

    # "q", "j", "d" are text while the modal is open
    _type(state, "qjd")

    assert state.running is True
    assert state.selection.index == 0
    assert state.input_flow.title_text == "qjd"
    assert len(state.store) == 1

    _press(state, Key.ESCAPE)
    assert state.input_flow.mode is InputMode.INACTIVE
    assert len(state.store) == 1


def test_confirm_with_empty_title_cancels(state: AppState) -> None:
    _press(state, "a", Key.TAB)
    _type(state, "desc only")
    _press(state, Key.ENTER)

    assert len(state.store) == 0
    assert state.input_flow.mode is InputMode.INACTIVE
    assert not state.store.path.exists()


def test_backspace_in_modal(state: AppState) -> None:
    _press(state, "a")
    _type(state, "abc")
    _press(state, Key.BACKSPACE)
    assert state.input_flow.title_text == "ab"
    assert state.input_flow.active_field is InputField.TITLE


def test_edit_key_opens_prefilled_modal(state: AppState) -> None:
    state.store.create("old title", "old desc")
    state.store.toggle(0)
    _press(state, "j", "e")

    assert state.input_flow.title_text == "old title"
    _press(state, Key.BACKSPACE, Key.BACKSPACE, Key.BACKSPACE, Key.BACKSPACE, Key.BACKSPACE)
    _type(state, "new")
    _press(state, Key.ENTER)

    assert state.store.tasks == (Task(title="old new", description="old desc", done=True),)
    assert _on_disk(state)[0]["title"] == "old new"


def test_quit_stops_the_loop(state: AppState) -> None:
    assert registry.handle(state, "q") is False
    assert state.running is False


def test_persist_error_becomes_status_message(fake_state: AppState) -> None:
    fake_state.store.fail_saves = True

    registry.handle(fake_state, "a")
    for ch in "offline":
        registry.handle(fake_state, ch)
    assert registry.handle(fake_state, Key.ENTER) is True

    assert fake_state.status_message is not None
    assert "could not save" in fake_state.status_message
    assert fake_state.store.tasks == (Task(title="offline"),)
    assert fake_state.selection.index == 0
    assert fake_state.input_flow.mode is InputMode.INACTIVE

    # next key clears the warning
    registry.handle(fake_state, "k")
    assert fake_state.status_message is None


def test_failed_delete_still_reconciles_selection(fake_state: AppState) -> None:
    fake_state.store.create("a")
    fake_state.store.create("b")
    fake_state.store.fail_saves = True
    fake_state.selection.last()

    registry.handle(fake_state, "d")

    assert [t.title for t in fake_state.store.tasks] == ["a"]
    assert fake_state.selection.index == 0
    assert fake_state.status_message is not None


def test_unknown_key_is_ignored(state: AppState) -> None:
    assert registry.handle(state, "z") is True
    assert state.status_message is None


def test_snapshot_reflects_state_without_mutation(state: AppState) -> None:
    state.store.create("a", "desc")
    _press(state, "j", "a")
    _type(state, "draft")

    snap = state.snapshot()

    assert snap.tasks == (Task(title="a", description="desc"),)
    assert snap.selected == 0
    assert snap.selected_task == Task(title="a", description="desc")
    assert snap.input.mode is InputMode.EDITING_TITLE
    assert snap.input.title_text == "draft"
    assert snap.help_lines
    assert state.snapshot() == snap


def test_custom_registry_and_help(fake_state: AppState) -> None:
    reg = KeyRegistry()
    called: list[str] = []
    reg.register("ping", lambda state: called.append("ping"), "ping it", ["p", Key.RIGHT])

    reg.handle(fake_state, "p")
    reg.handle(fake_state, Key.RIGHT)
    assert called == ["ping", "ping"]
    assert reg.build_help() == ["p/Right ping it"]
