"""Textual app projecting the rendered todo tree.

Keys:
- Enter: add a todo (pending input) or commit an edit (todo label)
- Tab: open a sub-list for input, or expand a collapsed todo
- Escape: discard edits; deletes a todo whose label was cleared
- Down (on a label): jump to the pending input
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Button, Checkbox, Footer, Header, Input

from nestodo.cli.tui.controller import TodoController
from nestodo.cli.tui.messages import FieldFocused
from nestodo.cli.tui.state import Intent, IntentType
from nestodo.cli.tui.view import FieldKind, FocusedField, RenderedTree
from nestodo.cli.tui.widgets.todo_tree import (
    PENDING_INPUT_ID,
    DeleteCompletedButton,
    PendingTodoInput,
    TodoButton,
    TodoEdit,
    TodoToggle,
    list_widgets,
    widget_id,
)

logger = logging.getLogger(__name__)


class NestodoApp(App[None]):
    """Nested todo list editor."""

    TITLE = "nestodo"
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("tab", "open_sublist", "Sub-list", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    #todo-list {
        height: 1fr;
        padding: 0 1;
    }
    #delete-completed {
        margin: 0 1;
    }
    """

    def __init__(self, controller: TodoController, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="todo-list")
        yield DeleteCompletedButton()
        yield Footer()

    async def on_mount(self) -> None:
        if self.controller.state.rendered is None:
            self.controller.start()
        await self._project()

    # --- Projection ---

    async def _project(self) -> None:
        """Rebuild all widgets from the controller's rendered tree."""
        tree = self.controller.rendered
        container = self.query_one("#todo-list", VerticalScroll)
        await container.remove_children()
        await container.mount_all(list_widgets(tree.root, tree))
        self.query_one(DeleteCompletedButton).display = tree.show_delete_completed
        self._restore_focus(tree)
        logger.debug("Projected %d root todos, input under %s", len(tree.root.items), tree.pending_input.attached_to)

    def _restore_focus(self, tree: RenderedTree) -> None:
        focused = tree.focus
        if focused is None:
            return
        if focused.kind is FieldKind.EDIT and focused.todo_id:
            selector = f"#{widget_id('edit', focused.todo_id)}"
        else:
            selector = f"#{PENDING_INPUT_ID}"
        for widget in self.query(selector):
            widget.focus()
            return

    async def _dispatch(self, intent: Intent) -> None:
        if self.controller.dispatch(intent):
            await self._project()

    # --- Input events ---

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if isinstance(event.input, PendingTodoInput):
            await self._dispatch(
                Intent(IntentType.ADD_TODO, {"todo_id": event.input.list_id, "text": event.value})
            )
        elif isinstance(event.input, TodoEdit):
            await self._dispatch(
                Intent(IntentType.CHANGE_TODO, {"todo_id": event.input.todo_id, "text": event.value})
            )

    async def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        if isinstance(event.checkbox, TodoToggle):
            await self._dispatch(Intent(IntentType.TOGGLE_COMPLETED, {"todo_id": event.checkbox.todo_id}))

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button = event.button
        if isinstance(button, DeleteCompletedButton):
            await self._dispatch(Intent(IntentType.DELETE_COMPLETED))
        elif isinstance(button, TodoButton) and button.kind == "delete":
            await self._dispatch(Intent(IntentType.DELETE_TODO, {"todo_id": button.todo_id}))
        elif isinstance(button, TodoButton) and button.kind == "collapse":
            await self._dispatch(Intent(IntentType.COLLAPSE_LIST, {"todo_id": button.todo_id}))

    async def on_todo_edit_clicked(self, event: TodoEdit.Clicked) -> None:
        await self._dispatch(Intent(IntentType.MOVE_INPUT, {"todo_id": event.edit.todo_id}))

    def on_field_focused(self, event: FieldFocused) -> None:
        widget = event.widget
        if isinstance(widget, TodoEdit):
            self.controller.focus_field(self.controller.edit_field(widget.todo_id))
        elif isinstance(widget, PendingTodoInput):
            self.controller.focus_field(FocusedField(FieldKind.INPUT, widget.list_id))
        else:
            self.controller.focus_field(FocusedField(FieldKind.CONTROL, None))

    # --- Actions ---

    async def action_cancel(self) -> None:
        focused = self.focused
        if isinstance(focused, TodoEdit):
            await self._dispatch(Intent(IntentType.CANCEL_EDIT, {"todo_id": focused.todo_id, "text": focused.value}))
        elif isinstance(focused, PendingTodoInput):
            await self._dispatch(Intent(IntentType.CANCEL_EDIT, {"todo_id": None, "text": focused.value}))

    async def action_open_sublist(self) -> None:
        focused = self.focused
        if isinstance(focused, TodoEdit):
            await self._dispatch(Intent(IntentType.OPEN_SUBLIST, {"todo_id": focused.todo_id, "text": focused.value}))
        elif isinstance(focused, PendingTodoInput):
            await self._dispatch(Intent(IntentType.OPEN_SUBLIST, {"todo_id": None, "text": focused.value}))
        else:
            self.action_focus_next()
