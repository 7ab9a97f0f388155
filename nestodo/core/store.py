"""JSON-file persistence for todo trees.

The file holds one JSON object mapping a namespace to its root list, the same
shape the browser version kept in localStorage.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from nestodo.core.models import TodoNode, TodoRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[TodoRecord])


class TodoStore:
    """Namespaced key-value store backed by a single JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, object]:  # guard: loose-dict - namespaces hold arbitrary payloads
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def load(self, namespace: str) -> list[TodoNode]:
        """Load the root list stored under `namespace`.

        Missing, unreadable or malformed data yields an empty list.
        """
        try:
            raw = self._read_all().get(namespace)
            if raw is None:
                logger.debug("No todos stored under %r in %s", namespace, self.path)
                return []
            records = _RECORDS.validate_python(raw)
        except (ValueError, ValidationError, TypeError, OSError) as e:
            logger.warning("Failed to load todos %r from %s: %s", namespace, self.path, e)
            return []

        todos = [record.to_node() for record in records]
        logger.info("Loaded %d root todos from %s", len(todos), self.path)
        return todos

    def save(self, namespace: str, todos: list[TodoNode]) -> None:
        """Store `todos` under `namespace`, keeping other namespaces intact.

        Uses atomic replacement and advisory locking. Failures are logged and
        the write is skipped.
        """
        payload = _RECORDS.dump_python([TodoRecord.from_node(todo) for todo in todos], mode="json")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            lock_path = self.path.with_suffix(".lock")
            with open(lock_path, "w", encoding="utf-8") as lock_file:
                try:
                    import fcntl

                    fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
                except (ImportError, OSError):
                    pass  # fcntl not available or locking failed, proceed best-effort

                try:
                    data = self._read_all()
                except (ValueError, TypeError) as e:
                    logger.warning("Overwriting unreadable store %s: %s", self.path, e)
                    data = {}
                data[namespace] = payload

                tmp_path = self.path.with_suffix(".tmp")
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                    f.flush()
                    os.fsync(f.fileno())

                os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Failed to save todos %r to %s: %s", namespace, self.path, e)
            return

        logger.debug("Saved %d root todos under %r to %s", len(todos), namespace, self.path)
