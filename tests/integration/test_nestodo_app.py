"""Drive the Textual app through its pilot."""

from __future__ import annotations

import pytest

from nestodo.cli.tui.app import NestodoApp
from nestodo.cli.tui.controller import TodoController
from nestodo.cli.tui.renderer import TodoRenderer
from nestodo.cli.tui.state import TodoAppState
from nestodo.cli.tui.widgets.todo_tree import DeleteCompletedButton, PendingTodoInput, TodoEdit, TodoSublist
from nestodo.core.models import TodoNode
from nestodo.core.store import TodoStore


def _app(tmp_path, todos: list[TodoNode] | None = None) -> tuple[NestodoApp, TodoController, TodoStore]:
    store = TodoStore(tmp_path / "todos.json")
    controller = TodoController(TodoAppState(todos=todos or []), TodoRenderer(store, "todoList"))
    return NestodoApp(controller), controller, store


@pytest.mark.asyncio
async def test_enter_in_pending_input_adds_todo(tmp_path) -> None:
    app, controller, store = _app(tmp_path)

    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.focused, PendingTodoInput)

        await pilot.press("b", "u", "y", "enter")
        await pilot.pause()

        assert [t.text for t in controller.state.todos] == ["buy"]
        assert [t.text for t in store.load("todoList")] == ["buy"]
        assert len(app.query(PendingTodoInput)) == 1
        assert isinstance(app.focused, PendingTodoInput)


@pytest.mark.asyncio
async def test_tab_opens_sublist_under_last_todo(tmp_path) -> None:
    parent = TodoNode(text="parent", id="p1")
    app, controller, _ = _app(tmp_path, [parent])

    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("tab")
        await pilot.pause()

        pending = app.query_one(PendingTodoInput)
        assert pending.list_id == "p1"

        await pilot.press("k", "i", "d", "enter")
        await pilot.pause()

        assert [c.text for c in parent.children] == ["kid"]
        assert app.query_one(PendingTodoInput).list_id == "p1"
        assert len(app.query(TodoSublist)) == 1


@pytest.mark.asyncio
async def test_escape_on_emptied_label_deletes_todo(tmp_path) -> None:
    app, controller, _ = _app(tmp_path, [TodoNode(text="gone soon", id="g1"), TodoNode(text="stays", id="s1")])

    async with app.run_test() as pilot:
        await pilot.pause()
        edit = app.query_one("#edit-g1", TodoEdit)
        edit.value = ""
        edit.focus()
        await pilot.pause()

        await pilot.press("escape")
        await pilot.pause()

        assert [t.id for t in controller.state.todos] == ["s1"]


@pytest.mark.asyncio
async def test_toggle_shows_delete_completed(tmp_path) -> None:
    app, controller, _ = _app(tmp_path, [TodoNode(text="done", id="d1"), TodoNode(text="open", id="o1")])

    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.query_one(DeleteCompletedButton).display is False

        assert controller.toggle_completed("d1")
        await app._project()
        await pilot.pause()

        assert app.query_one(DeleteCompletedButton).display is True
        assert app.query_one("#edit-d1", TodoEdit).has_class("completed")

        await pilot.click("#delete-completed")
        await pilot.pause()

        assert [t.id for t in controller.state.todos] == ["o1"]
        assert app.query_one(DeleteCompletedButton).display is False
