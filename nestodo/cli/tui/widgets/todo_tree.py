"""Widgets mirroring a `RenderedTree`.

A rendered list becomes a `TodoSublist`, each rendered item a `TodoItem`
holding a `TodoRow` (checkbox, editable label, collapse and delete buttons)
and, for non-leaves, the nested `TodoSublist`.
"""

from __future__ import annotations

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input

from nestodo.cli.tui.base import NestodoMixin
from nestodo.cli.tui.messages import FocusReporter
from nestodo.cli.tui.view import PendingInput, RenderedItem, RenderedList, RenderedTree
from nestodo.constants import COMPLETED_COLOR, INPUT_PLACEHOLDER

PENDING_INPUT_ID = "todo-input"


def widget_id(prefix: str, todo_id: str) -> str:
    """Build a DOM id; todo ids may start with a digit, so always prefix."""
    return f"{prefix}-{todo_id}"


class TodoEdit(FocusReporter, NestodoMixin, Input):
    """Editable label of a todo."""

    class Clicked(Message):
        """Posted when the label is clicked."""

        def __init__(self, edit: TodoEdit) -> None:
            super().__init__()
            self.edit = edit

    BINDINGS = [
        Binding("down", "focus_input", "To input", show=False),
    ]

    DEFAULT_CSS = f"""
    TodoEdit {{
        width: 1fr;
        border: none;
        height: 1;
        padding: 0 1;
    }}
    TodoEdit.completed {{
        color: {COMPLETED_COLOR};
        text-style: strike;
    }}
    """

    def __init__(self, item: RenderedItem) -> None:
        classes = "edit completed" if item.completed else "edit"
        super().__init__(value=item.text, id=widget_id("edit", item.todo_id), classes=classes)
        self.todo_id = item.todo_id

    def on_click(self, _event: Click) -> None:
        self.post_message(self.Clicked(self))

    def action_focus_input(self) -> None:
        for pending in self.app.query(PendingTodoInput):
            pending.focus()


class TodoToggle(FocusReporter, NestodoMixin, Checkbox):
    """Completion checkbox of a todo."""

    DEFAULT_CSS = """
    TodoToggle {
        border: none;
        height: 1;
        padding: 0;
    }
    """

    def __init__(self, item: RenderedItem) -> None:
        super().__init__("", item.completed, id=widget_id("toggle", item.todo_id))
        self.todo_id = item.todo_id


class TodoButton(FocusReporter, NestodoMixin, Button):
    """Per-todo control button ("Delete" or the collapse toggle)."""

    DEFAULT_CSS = """
    TodoButton {
        min-width: 10;
        height: 1;
        border: none;
        margin: 0 0 0 1;
    }
    """

    def __init__(self, label: str, todo_id: str, kind: str) -> None:
        super().__init__(label, id=widget_id(kind, todo_id), classes=kind)
        self.todo_id = todo_id
        self.kind = kind


class PendingTodoInput(FocusReporter, NestodoMixin, Input):
    """The single field for new todos."""

    DEFAULT_CSS = """
    PendingTodoInput {
        width: 1fr;
        height: 3;
    }
    """

    def __init__(self, pending: PendingInput) -> None:
        super().__init__(value=pending.value, placeholder=INPUT_PLACEHOLDER, id=PENDING_INPUT_ID)
        self.list_id = pending.attached_to


class TodoRow(Horizontal):
    DEFAULT_CSS = """
    TodoRow {
        height: 1;
    }
    """


class TodoItem(Vertical):
    DEFAULT_CSS = """
    TodoItem {
        height: auto;
    }
    """

    def __init__(self, *children: Widget, todo_id: str) -> None:
        super().__init__(*children, id=widget_id("todo", todo_id), classes="todo")
        self.todo_id = todo_id


class TodoSublist(Vertical):
    DEFAULT_CSS = """
    TodoSublist {
        height: auto;
        padding: 0 0 0 4;
    }
    TodoSublist.collapsed {
        display: none;
    }
    """

    def __init__(self, *children: Widget, subtree_id: str, hidden: bool) -> None:
        classes = "sublist collapsed" if hidden else "sublist"
        super().__init__(*children, id=widget_id("list", subtree_id), classes=classes)
        self.subtree_id = subtree_id


def _item_widget(item: RenderedItem, tree: RenderedTree) -> TodoItem:
    row: list[Widget] = [TodoToggle(item), TodoEdit(item)]
    if item.collapse_label is not None:
        row.append(TodoButton(item.collapse_label, item.todo_id, "collapse"))
    row.append(TodoButton("Delete", item.todo_id, "delete"))

    children: list[Widget] = [TodoRow(*row)]
    if item.sublist is not None:
        children.append(
            TodoSublist(
                *list_widgets(item.sublist, tree),
                subtree_id=item.todo_id,
                hidden=item.sublist.hidden,
            )
        )
    return TodoItem(*children, todo_id=item.todo_id)


def list_widgets(rendered: RenderedList, tree: RenderedTree) -> list[Widget]:
    """Widgets for one rendered list, pending input last when attached here."""
    widgets: list[Widget] = [_item_widget(item, tree) for item in rendered.items]
    if tree.input_list() is rendered:
        widgets.append(PendingTodoInput(tree.pending_input))
    return widgets


class DeleteCompletedButton(FocusReporter, NestodoMixin, Button):
    """Sweeps completed todos; only shown while some are completed."""

    def __init__(self) -> None:
        super().__init__("Delete Completed", id="delete-completed", variant="warning")
