"""Id-based lookup into the todo tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from nestodo.core.models import TodoNode


@dataclass(frozen=True)
class TodoRef:
    """Position of a todo inside the list that owns it."""

    todo: TodoNode
    index: int
    todos: list[TodoNode]


def locate(todos: list[TodoNode], todo_id: str) -> TodoRef | None:
    """Find a todo by id anywhere below `todos`.

    Each node's subtree is searched before the node itself is compared, and
    the first hit wins.

    Args:
        todos: List to search (the root list or any children list)
        todo_id: Id to look for

    Returns:
        Reference to the todo and its owning list, or None when absent
    """
    for index, todo in enumerate(todos):
        found = locate(todo.children, todo_id)
        if found:
            return found
        if todo.id == todo_id:
            return TodoRef(todo=todo, index=index, todos=todos)
    return None


def iter_todos(todos: list[TodoNode]) -> Iterator[TodoNode]:
    """Yield every todo, parents before their children."""
    for todo in todos:
        yield todo
        yield from iter_todos(todo.children)


def iter_completed(todos: list[TodoNode]) -> Iterator[TodoNode]:
    """Yield completed todos in tree order."""
    return (todo for todo in iter_todos(todos) if todo.completed)
