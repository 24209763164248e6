# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TodosManager depends on the TodoCache Protocol instead of a concrete store,
so the volatile and durable strategies are swappable and tests can plug fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from .models import Todo


class TodoCache(Protocol):
    """Whole-sequence persistence for todos."""

    def load(self) -> list[Todo]: ...

    def save(self, todos: Sequence[Todo]) -> bool:
        """Persist the full sequence. Returns False on a non-fatal failure (already logged)."""
        ...
