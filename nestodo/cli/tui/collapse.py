"""Collapse state derived from the rendered view."""

from __future__ import annotations

import logging

from nestodo.cli.tui.view import RenderedTree
from nestodo.constants import COLLAPSE_LABEL, EXPAND_LABEL

logger = logging.getLogger(__name__)


def capture_collapsed(rendered: RenderedTree | None) -> set[str]:
    """Return subtree ids of every hidden sublist.

    Must run before a rebuild replaces `rendered`.
    """
    if rendered is None:
        return set()
    return {
        sublist.subtree_id
        for sublist in rendered.iter_lists()
        if sublist.hidden and sublist.subtree_id is not None
    }


def is_collapsed(collapsed: set[str], todo_id: str) -> bool:
    return todo_id in collapsed


def toggle_collapse(rendered: RenderedTree, todo_id: str) -> bool:
    """Show or hide a todo's sublist and relabel its control.

    Returns:
        True if the item had both a sublist and a collapse control
    """
    item = rendered.find_item(todo_id)
    if item is None or item.sublist is None or not item.has_collapse_control:
        return False

    if item.sublist.hidden:
        item.sublist.hidden = False
        item.collapse_label = COLLAPSE_LABEL
    else:
        item.sublist.hidden = True
        item.collapse_label = EXPAND_LABEL
    logger.debug("Sublist %s %s", todo_id[:8], "hidden" if item.sublist.hidden else "shown")
    return True
