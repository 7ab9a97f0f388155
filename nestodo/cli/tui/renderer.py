"""Full rebuild of the rendered view from the todo tree."""

from __future__ import annotations

import logging

from nestodo.cli.tui.collapse import capture_collapsed, is_collapsed
from nestodo.cli.tui.view import (
    FieldKind,
    FocusedField,
    PendingInput,
    RenderedItem,
    RenderedList,
    RenderedTree,
)
from nestodo.constants import COLLAPSE_LABEL, EXPAND_LABEL
from nestodo.core.models import TodoNode
from nestodo.core.store import TodoStore

logger = logging.getLogger(__name__)


def _focus_anchor(previous: RenderedTree | None) -> str | None:
    """Subtree id of the list whose text field had focus (None: root)."""
    if previous is None or previous.focus is None or not previous.focus.is_text:
        return None
    return previous.focus.list_id


def _build_item(todo: TodoNode, collapsed: set[str]) -> RenderedItem:
    item = RenderedItem(todo_id=todo.id, text=todo.text, completed=todo.completed)
    if todo.is_leaf:
        return item

    hidden = is_collapsed(collapsed, todo.id)
    item.collapse_label = EXPAND_LABEL if hidden else COLLAPSE_LABEL
    item.sublist = RenderedList(
        subtree_id=todo.id,
        items=[_build_item(child, collapsed) for child in todo.children],
        hidden=hidden,
    )
    return item


class TodoRenderer:
    """Persists the tree and rebuilds its rendered view."""

    def __init__(self, store: TodoStore, namespace: str) -> None:
        self.store = store
        self.namespace = namespace

    def render(self, todos: list[TodoNode], previous: RenderedTree | None = None) -> RenderedTree:
        """Rebuild the view for `todos`.

        Collapse state and the focused list are read from `previous` before
        anything is rebuilt. The pending input lands in the list that held
        the focused text field when that list still exists, else in the root.
        """
        self.store.save(self.namespace, todos)
        collapsed = capture_collapsed(previous)
        anchor = _focus_anchor(previous)

        tree = RenderedTree(root=RenderedList(subtree_id=None, items=[_build_item(t, collapsed) for t in todos]))
        tree.show_delete_completed = any(item.completed for item in tree.iter_items())

        target = tree.find_list(anchor) if anchor is not None else None
        if anchor is not None and target is None:
            logger.debug("Focused list %s is gone, input back to root", anchor[:8])
        tree.pending_input = PendingInput(attached_to=target.subtree_id if target else None)
        tree.focus = FocusedField(FieldKind.INPUT, tree.pending_input.attached_to)
        return tree
