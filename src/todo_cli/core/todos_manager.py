# src/todo_cli/core/todos_manager.py

from __future__ import annotations

import logging

from .models import Todo
from .ports import TodoCache

logger = logging.getLogger(__name__)


class TodosManager:
    """
    In-memory authority over the session's todo list.

    - loads the full list once from the cache at construction
    - saves the full list after every successful mutation
    - addresses todos by 1-based position (as shown to the user)

    Out-of-range positions are not errors: toggle/delete return None and
    leave both memory and storage untouched.
    """

    def __init__(self, cache: TodoCache) -> None:
        self._cache = cache
        self._todos: list[Todo] = list(cache.load())
        self.last_save_ok = True
        logger.info("TodosManager ready total=%d", len(self._todos))

    def __len__(self) -> int:
        return len(self._todos)

    def _persist(self) -> None:
        self.last_save_ok = self._cache.save(list(self._todos))
        if not self.last_save_ok:
            logger.debug("Save failed; in-memory list kept (total=%d).", len(self._todos))

    def _position(self, index: int) -> int | None:
        pos = index - 1
        if pos < 0 or pos >= len(self._todos):
            logger.debug("Index %s out of range (total=%d).", index, len(self._todos))
            return None
        return pos

    # ---- public API ----

    def add(self, title: str) -> Todo:
        todo = Todo(title=title)
        self._todos.append(todo)
        self._persist()
        logger.info("Added todo id=%s", todo.id)
        return todo

    def list(self) -> list[tuple[int, Todo]]:
        return [(i, todo) for i, todo in enumerate(self._todos, start=1)]

    def toggle(self, index: int) -> Todo | None:
        pos = self._position(index)
        if pos is None:
            return None
        todo = self._todos[pos]
        todo.completed = not todo.completed
        self._persist()
        logger.info("Toggled todo id=%s completed=%s", todo.id, todo.completed)
        return todo

    def delete(self, index: int) -> Todo | None:
        pos = self._position(index)
        if pos is None:
            return None
        todo = self._todos.pop(pos)
        self._persist()
        logger.info("Deleted todo id=%s", todo.id)
        return todo
