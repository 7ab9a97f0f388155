"""Nested todo tree model and its operations."""

from nestodo.core.errors import InvalidIndexError, NestodoError
from nestodo.core.locator import TodoRef, iter_completed, iter_todos, locate
from nestodo.core.models import TodoNode
from nestodo.core.mutations import (
    add_todo,
    delete_at,
    delete_completed_sweep,
    edit_text,
    toggle_completed,
)

__all__ = [
    "InvalidIndexError",
    "NestodoError",
    "TodoNode",
    "TodoRef",
    "add_todo",
    "delete_at",
    "delete_completed_sweep",
    "edit_text",
    "iter_completed",
    "iter_todos",
    "locate",
    "toggle_completed",
]
