# src/todo_cli/storage/memory_cache.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..core.models import Todo


class InMemoryCache:
    """Volatile cache: keeps the last saved list for the lifetime of the process."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def load(self) -> list[Todo]:
        return [replace(t) for t in self._todos]

    def save(self, todos: Sequence[Todo]) -> bool:
        # Copies, so later in-place toggles do not leak into the saved snapshot.
        self._todos = [replace(t) for t in todos]
        return True
