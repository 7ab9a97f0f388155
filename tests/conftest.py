"""Pytest configuration for nestodo tests."""

import logging
import os

import pytest

# Keep the user's ~/.nestodo config out of the test run
os.environ["NESTODO_CONFIG"] = os.path.join(os.path.dirname(__file__), "no-such-nestodo.yml")
os.environ.setdefault("NESTODO_ENV_PATH", os.path.join(os.path.dirname(__file__), "no-such.env"))

from nestodo.cli.tui.controller import TodoController  # noqa: E402
from nestodo.cli.tui.renderer import TodoRenderer  # noqa: E402
from nestodo.cli.tui.state import TodoAppState  # noqa: E402
from nestodo.core.models import TodoNode  # noqa: E402
from nestodo.core.store import TodoStore  # noqa: E402

logging.getLogger("nestodo").handlers.clear()

NAMESPACE = "todoList"


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))


@pytest.fixture
def store(tmp_path):
    return TodoStore(tmp_path / "todos.json")


@pytest.fixture
def renderer(store):
    return TodoRenderer(store, NAMESPACE)


@pytest.fixture
def sample_todos():
    """Three levels deep:

    groceries
      milk
        2%
      bread
    call mom
    """
    two_percent = TodoNode(text="2%", id="id-2pct")
    milk = TodoNode(text="milk", id="id-milk", children=[two_percent])
    bread = TodoNode(text="bread", id="id-bread")
    groceries = TodoNode(text="groceries", id="id-groceries", children=[milk, bread])
    call = TodoNode(text="call mom", id="id-call")
    return [groceries, call]


@pytest.fixture
def controller(renderer, sample_todos):
    ctl = TodoController(TodoAppState(todos=sample_todos), renderer)
    ctl.start()
    return ctl
