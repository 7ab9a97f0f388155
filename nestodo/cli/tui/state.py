"""Application state and intents.

One `TodoAppState` exists per process: created at startup from the store and
never torn down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict, cast

from nestodo.cli.tui.view import RenderedTree
from nestodo.core.models import TodoNode


@dataclass
class TodoAppState:
    """Root todo list plus the last rendered view."""

    todos: list[TodoNode] = field(default_factory=list)
    rendered: RenderedTree | None = None


class IntentType(str, Enum):
    """Events the presentation layer can deliver."""

    ADD_TODO = "add_todo"
    CHANGE_TODO = "change_todo"
    DELETE_TODO = "delete_todo"
    TOGGLE_COMPLETED = "toggle_completed"
    COLLAPSE_LIST = "collapse_list"
    CANCEL_EDIT = "cancel_edit"
    DELETE_COMPLETED = "delete_completed"
    OPEN_SUBLIST = "open_sublist"
    MOVE_INPUT = "move_input"


class IntentPayload(TypedDict, total=False):
    todo_id: str | None  # Target todo; for ADD_TODO the owner of the list (None: root)
    text: str


@dataclass(frozen=True)
class Intent:
    """State transition request."""

    type: IntentType
    payload: IntentPayload = field(default_factory=lambda: cast(IntentPayload, {}))
