"""Entry points for presentation events.

Each event resolves its target by id, applies the mutation and triggers a
full render pass. Events that only rearrange the view (collapse toggles,
moving the pending input) update the rendered tree in place.
"""

from __future__ import annotations

import logging
from typing import Callable

from nestodo.cli.tui.collapse import toggle_collapse
from nestodo.cli.tui.renderer import TodoRenderer
from nestodo.cli.tui.state import Intent, IntentPayload, IntentType, TodoAppState
from nestodo.cli.tui.view import FieldKind, FocusedField, PendingInput, RenderedItem, RenderedList, RenderedTree
from nestodo.core import mutations
from nestodo.core.locator import locate
from nestodo.utils import clean_text

logger = logging.getLogger(__name__)


# Intents that name the todo they act on
_TARGETED_INTENTS = frozenset(
    {
        IntentType.CHANGE_TODO,
        IntentType.DELETE_TODO,
        IntentType.TOGGLE_COMPLETED,
        IntentType.COLLAPSE_LIST,
        IntentType.MOVE_INPUT,
    }
)


def _short(todo_id: str | None) -> str:
    return todo_id[:8] if todo_id else "root"


class TodoController:
    """Central controller for todo state and rendering."""

    def __init__(self, state: TodoAppState, renderer: TodoRenderer) -> None:
        self.state = state
        self.renderer = renderer
        self._handlers: dict[IntentType, Callable[[IntentPayload], bool]] = {
            IntentType.ADD_TODO: lambda p: self.add_todo(p.get("todo_id"), p.get("text", "")),
            IntentType.CHANGE_TODO: lambda p: self.change_todo(p["todo_id"], p.get("text", "")),
            IntentType.DELETE_TODO: lambda p: self.delete_todo(p["todo_id"]),
            IntentType.TOGGLE_COMPLETED: lambda p: self.toggle_completed(p["todo_id"]),
            IntentType.COLLAPSE_LIST: lambda p: self.collapse_list(p["todo_id"]),
            IntentType.CANCEL_EDIT: lambda p: self.cancel_edit(p.get("todo_id"), p.get("text", "")),
            IntentType.DELETE_COMPLETED: lambda p: self.delete_completed(),
            IntentType.OPEN_SUBLIST: lambda p: self.open_sublist(p.get("todo_id"), p.get("text", "")),
            IntentType.MOVE_INPUT: lambda p: self.move_input(p["todo_id"]),
        }

    @property
    def rendered(self) -> RenderedTree:
        if self.state.rendered is None:
            return self._render()
        return self.state.rendered

    def start(self) -> RenderedTree:
        """Run the initial render pass."""
        return self._render()

    def dispatch(self, intent: Intent) -> bool:
        """Route an intent to its entry point.

        Returns:
            True when the rendered view changed
        """
        logger.debug("Dispatch %s %s", intent.type.value, dict(intent.payload))
        if intent.type in _TARGETED_INTENTS and not intent.payload.get("todo_id"):
            logger.debug("Dispatch skipped: %s without todo_id", intent.type.value)
            return False
        return self._handlers[intent.type](intent.payload)

    def focus_field(self, focused: FocusedField | None) -> None:
        """Record which element holds focus in the presentation layer."""
        self.rendered.focus = focused

    # --- Render helpers ---

    def _render(self) -> RenderedTree:
        rendered = self.renderer.render(self.state.todos, self.state.rendered)
        self.state.rendered = rendered
        return rendered

    def _owner_id(self, todo_id: str) -> str | None:
        owner = self.rendered.owner_list(todo_id)
        return owner.subtree_id if owner else None

    def edit_field(self, todo_id: str) -> FocusedField:
        """Describe the edit field of `todo_id` as a focus target."""
        return FocusedField(FieldKind.EDIT, self._owner_id(todo_id), todo_id)

    def _focus_edit(self, todo_id: str) -> None:
        self.rendered.focus = self.edit_field(todo_id)

    def _attach_input(self, item: RenderedItem, value: str) -> None:
        if item.sublist is None:
            item.sublist = RenderedList(subtree_id=item.todo_id)
        self.rendered.pending_input = PendingInput(attached_to=item.todo_id, value=value)
        self.rendered.focus = FocusedField(FieldKind.INPUT, item.todo_id)

    # --- Entry points ---

    def add_todo(self, list_id: str | None, text: str) -> bool:
        """Add a todo to the root list or to the children of `list_id`."""
        text = clean_text(text)
        if not text:
            return False

        if list_id is None:
            target = self.state.todos
        else:
            ref = locate(self.state.todos, list_id)
            if ref is None:
                logger.debug("Add skipped: list %s not found", _short(list_id))
                return False
            target = ref.todo.children

        todo = mutations.add_todo(target, text)
        logger.info("Added todo %s under %s", _short(todo.id), _short(list_id))
        self.rendered.focus = FocusedField(FieldKind.INPUT, list_id)
        self._render()
        return True

    def change_todo(self, todo_id: str, text: str) -> bool:
        """Commit an edit; blank text deletes the todo."""
        ref = locate(self.state.todos, todo_id)
        if ref is None:
            logger.debug("Edit skipped: todo %s not found", _short(todo_id))
            return False

        self._focus_edit(todo_id)
        text = clean_text(text)
        if not text:
            return self.delete_todo(todo_id)

        mutations.edit_text(ref.todos, ref.index, text)
        self._render()
        return True

    def delete_todo(self, todo_id: str) -> bool:
        ref = locate(self.state.todos, todo_id)
        if ref is None:
            logger.debug("Delete skipped: todo %s not found", _short(todo_id))
            return False

        mutations.delete_at(ref.todos, ref.index)
        logger.info("Deleted todo %s", _short(todo_id))
        self._render()
        return True

    def toggle_completed(self, todo_id: str) -> bool:
        """Flip completion, then bring the pending input to the todo's list."""
        ref = locate(self.state.todos, todo_id)
        if ref is None:
            logger.debug("Toggle skipped: todo %s not found", _short(todo_id))
            return False

        mutations.toggle_completed(ref.todos, ref.index)
        self._render()
        self.move_input(todo_id, focus_input=True)
        return True

    def collapse_list(self, todo_id: str) -> bool:
        return toggle_collapse(self.rendered, todo_id)

    def cancel_edit(self, todo_id: str | None, text: str) -> bool:
        """Escape in a text field.

        An emptied edit field deletes its todo. Otherwise the field loses
        focus and the view is rebuilt, discarding unsaved edits.
        """
        if todo_id is not None and not clean_text(text):
            self._focus_edit(todo_id)
            return self.delete_todo(todo_id)

        self.rendered.focus = None
        self._render()
        return True

    def delete_completed(self) -> bool:
        """Remove every todo currently shown as completed."""
        mutations.delete_completed_sweep(self.state.todos, self.rendered.completed_ids())
        self._render()
        return True

    def open_sublist(self, todo_id: str | None, text: str) -> bool:
        """Move the pending input one level deeper.

        From an edit field (`todo_id` set): expand the todo when it is
        collapsed, otherwise attach the input to its sublist. From the pending
        input (`todo_id` None): attach it, keeping the typed text, to the
        sublist of the last todo in its current list.
        """
        rendered = self.rendered
        if todo_id is not None:
            item = rendered.find_item(todo_id)
            if item is None:
                return False
            if item.sublist is not None and item.sublist.hidden:
                return toggle_collapse(rendered, todo_id)
            if not clean_text(text):
                return False
            self._attach_input(item, "")
            return True

        owner = rendered.input_list()
        if not owner.items:
            return False
        item = owner.items[-1]
        if item.sublist is not None and item.sublist.hidden:
            toggle_collapse(rendered, item.todo_id)
        self._attach_input(item, clean_text(text))
        return True

    def move_input(self, todo_id: str, *, focus_input: bool = False) -> bool:
        """Attach the pending input to the list showing `todo_id`.

        Returns:
            True when the input actually moved
        """
        owner = self.rendered.owner_list(todo_id)
        if owner is None:
            return False

        moved = self.rendered.pending_input.attached_to != owner.subtree_id
        if moved:
            self.rendered.pending_input = PendingInput(attached_to=owner.subtree_id)
        if focus_input:
            self.rendered.focus = FocusedField(FieldKind.INPUT, owner.subtree_id)
        else:
            self.rendered.focus = FocusedField(FieldKind.EDIT, owner.subtree_id, todo_id)
        return moved

