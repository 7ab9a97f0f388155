"""Rendered view of the todo tree.

The renderer produces a `RenderedTree`: a snapshot of what is on screen
(lists, items, the single pending input and the focused field). Widgets mirror
it; nothing in here references the model's nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class FieldKind(str, Enum):
    """Kind of focusable element in the rendered view."""

    EDIT = "edit"  # Editable label of a todo
    INPUT = "input"  # Pending input slot
    CONTROL = "control"  # Checkbox or button


@dataclass(frozen=True)
class FocusedField:
    """The element holding input focus.

    list_id is the subtree id of the list containing the element (None for
    the root list).
    """

    kind: FieldKind
    list_id: str | None
    todo_id: str | None = None

    @property
    def is_text(self) -> bool:
        return self.kind in (FieldKind.EDIT, FieldKind.INPUT)


@dataclass
class PendingInput:
    """The one text field for new todos and the list it is attached to."""

    attached_to: str | None = None
    value: str = ""


@dataclass
class RenderedItem:
    """One rendered todo."""

    todo_id: str
    text: str
    completed: bool
    collapse_label: str | None = None  # None: no collapse control (leaf)
    sublist: RenderedList | None = None

    @property
    def has_collapse_control(self) -> bool:
        return self.collapse_label is not None


@dataclass
class RenderedList:
    """A rendered list; subtree_id is the owning todo's id, None for root."""

    subtree_id: str | None
    items: list[RenderedItem] = field(default_factory=list)
    hidden: bool = False


@dataclass
class RenderedTree:
    """Everything one render pass produced."""

    root: RenderedList
    pending_input: PendingInput = field(default_factory=PendingInput)
    show_delete_completed: bool = False
    focus: FocusedField | None = None

    def iter_lists(self) -> Iterator[RenderedList]:
        """Yield every list, root first, in display order."""

        def _walk(rendered: RenderedList) -> Iterator[RenderedList]:
            yield rendered
            for item in rendered.items:
                if item.sublist is not None:
                    yield from _walk(item.sublist)

        return _walk(self.root)

    def iter_items(self) -> Iterator[RenderedItem]:
        for rendered in self.iter_lists():
            yield from rendered.items

    def find_list(self, subtree_id: str | None) -> RenderedList | None:
        for rendered in self.iter_lists():
            if rendered.subtree_id == subtree_id:
                return rendered
        return None

    def find_item(self, todo_id: str) -> RenderedItem | None:
        for item in self.iter_items():
            if item.todo_id == todo_id:
                return item
        return None

    def owner_list(self, todo_id: str) -> RenderedList | None:
        """Return the list that displays the given todo."""
        for rendered in self.iter_lists():
            if any(item.todo_id == todo_id for item in rendered.items):
                return rendered
        return None

    def input_list(self) -> RenderedList:
        """Return the list holding the pending input."""
        return self.find_list(self.pending_input.attached_to) or self.root

    def completed_ids(self) -> list[str]:
        """Ids of items shown as completed, in display order."""
        return [item.todo_id for item in self.iter_items() if item.completed]
