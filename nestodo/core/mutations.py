"""In-place mutations on a todo list.

Every operation takes the list that owns the target explicitly; resolving an
id to a list and position is the locator's job.
"""

from __future__ import annotations

import logging
from typing import Iterable

from nestodo.core.errors import InvalidIndexError
from nestodo.core.locator import iter_completed, locate
from nestodo.core.models import TodoNode

logger = logging.getLogger(__name__)


def _check_index(todos: list[TodoNode], index: int) -> None:
    if not 0 <= index < len(todos):
        raise InvalidIndexError(index, len(todos))


def add_todo(todos: list[TodoNode], text: str) -> TodoNode:
    """Append a new open todo. `text` must already be trimmed and non-empty."""
    todo = TodoNode(text=text)
    todos.append(todo)
    return todo


def edit_text(todos: list[TodoNode], index: int, text: str) -> None:
    _check_index(todos, index)
    todos[index].text = text


def delete_at(todos: list[TodoNode], index: int) -> TodoNode:
    """Remove the todo at `index` together with its subtree."""
    _check_index(todos, index)
    return todos.pop(index)


def toggle_completed(todos: list[TodoNode], index: int) -> None:
    _check_index(todos, index)
    todos[index].completed = not todos[index].completed


def delete_completed_sweep(todos: list[TodoNode], completed_ids: Iterable[str] | None = None) -> int:
    """Remove completed todos from anywhere in the tree.

    Args:
        todos: Root list
        completed_ids: Ids shown as completed, in display order. Defaults to
            every completed todo in tree order.

    Returns:
        Number of todos removed directly (subtrees not counted)
    """
    if completed_ids is None:
        completed_ids = [todo.id for todo in iter_completed(todos)]

    removed = 0
    for todo_id in list(completed_ids):
        ref = locate(todos, todo_id)
        if ref is None:
            # Already gone with a completed ancestor
            logger.debug("Sweep skipped %s (no longer in tree)", todo_id[:8])
            continue
        delete_at(ref.todos, ref.index)
        removed += 1
    if removed:
        logger.info("Deleted %d completed todos", removed)
    return removed
