# src/todo_cli/core/models.py

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

CHECK_MARK = "✅"
CROSS_MARK = "❌"


def new_todo_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class Todo:
    """
    A single todo item.

    Notes:
    - `id` is assigned once at creation and never reused.
    - the display index is NOT stored here; it is derived from list position.
    """

    title: str
    completed: bool = False
    id: str = field(default_factory=new_todo_id)

    def __str__(self) -> str:
        return f"{self.title} [{CHECK_MARK if self.completed else CROSS_MARK}]"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Todo:
        if not isinstance(raw, Mapping):
            raise ValueError(f"todo record must be an object, got {type(raw).__name__}")

        todo_id = raw.get("id")
        title = raw.get("title")
        # Older files store the flag as "isCompleted".
        completed = raw.get("completed", raw.get("isCompleted", False))

        if not isinstance(todo_id, str) or not todo_id:
            raise ValueError("todo record has no string id")
        if not isinstance(title, str):
            raise ValueError(f"todo {todo_id} has no string title")
        if not isinstance(completed, bool):
            raise ValueError(f"todo {todo_id} has a non-boolean completed flag")

        return cls(id=todo_id, title=title, completed=completed)
