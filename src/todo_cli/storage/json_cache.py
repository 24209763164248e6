# src/todo_cli/storage/json_cache.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..core.models import Todo
from ..errors import StoragePathError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "todos.json"


class JSONFileCache:
    """
    Durable cache backed by a single JSON file (an array of todo records).

    - the file path is resolved once, at construction
    - load/save never raise for I/O or format problems; they log a warning
    - save rewrites the whole file via a temp file + os.replace
    """

    def __init__(self, filename: str = DEFAULT_FILENAME, base_dir: str | Path | None = None) -> None:
        if base_dir is None:
            try:
                base_dir = Path.cwd()
            except OSError as e:
                raise StoragePathError(f"Cannot determine working directory for {filename}: {e}") from e
        self._path = Path(base_dir) / filename
        logger.info("JSONFileCache ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Todo]:
        path = self._path
        try:
            data = json.loads(path.read_text("utf-8"))
        except FileNotFoundError:
            logger.warning("No todos file at %s; starting with an empty list.", path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read todos file %s (%s); starting with an empty list.", path, e)
            return []
        except json.JSONDecodeError as e:
            logger.warning("Malformed todos file %s (%s); starting with an empty list.", path, e)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Malformed todos file %s (expected a JSON array, got %s); starting with an empty list.",
                path,
                type(data).__name__,
            )
            return []

        todos: list[Todo] = []
        for n, raw in enumerate(data):
            try:
                todos.append(Todo.from_dict(raw))
            except ValueError as e:
                logger.warning("Skipping todo record #%d in %s: %s", n, path, e)

        logger.info("Loaded %d todos from %s", len(todos), path)
        return todos

    def save(self, todos: Sequence[Todo]) -> bool:
        path = self._path
        tmp = path.with_name(path.name + ".tmp")
        try:
            # ASCII escapes keep lone surrogates (from undecodable input) encodable.
            payload = json.dumps([t.to_dict() for t in todos], indent=2)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to save todos to %s: %s", path, e)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Saved %d todos to %s", len(todos), path)
        return True
