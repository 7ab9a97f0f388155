from __future__ import annotations

from pathlib import Path

NESTODO_HOME = (Path("~/.nestodo")).expanduser()
CONFIG_PATH = NESTODO_HOME / "nestodo.yml"
STORE_PATH = NESTODO_HOME / "todos.json"
LOG_PATH = NESTODO_HOME / "nestodo.log"
