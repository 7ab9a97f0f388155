"""nestodo command line entry point.

Usage:
    nestodo [--store PATH] [--namespace NAME] [--log-level LEVEL]   # interactive editor
    nestodo show [...]                                              # print the tree
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from nestodo.cli.tui.controller import TodoController
from nestodo.cli.tui.renderer import TodoRenderer
from nestodo.cli.tui.state import TodoAppState
from nestodo.config import config
from nestodo.constants import COMPLETED_COLOR
from nestodo.core.models import TodoNode
from nestodo.core.store import TodoStore
from nestodo.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _todo_label(todo: TodoNode) -> Text:
    if todo.completed:
        return Text.assemble("[x] ", (todo.text, f"strike {COMPLETED_COLOR}"))
    return Text(f"[ ] {todo.text}")


def build_rich_tree(todos: list[TodoNode], title: str) -> Tree:
    """Build a rich Tree mirroring the todo tree."""
    tree = Tree(Text(title, style="bold"))

    def _add(branch: Tree, nodes: list[TodoNode]) -> None:
        for todo in nodes:
            _add(branch.add(_todo_label(todo)), todo.children)

    _add(tree, todos)
    return tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nestodo", description="Nested todo lists in the terminal.")
    parser.add_argument("command", nargs="?", choices=("edit", "show"), default="edit")
    parser.add_argument("--store", type=Path, default=None, help="Todo store file (JSON)")
    parser.add_argument("--namespace", default=None, help="Key of the todo list inside the store")
    parser.add_argument("--log-level", default=None, help="Override NESTODO_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)

    store = TodoStore(args.store or Path(config.store_path))
    namespace = args.namespace or config.namespace
    todos = store.load(namespace)

    if args.command == "show":
        Console().print(build_rich_tree(todos, namespace))
        return 0

    from nestodo.cli.tui.app import NestodoApp

    logger.info("Starting editor on %s (%s)", store.path, namespace)
    controller = TodoController(TodoAppState(todos=todos), TodoRenderer(store, namespace))
    NestodoApp(controller).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
