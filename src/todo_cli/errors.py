# src/todo_cli/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for todo_cli errors."""


class StoragePathError(TodoError):
    """The durable store could not determine where its file lives (fatal at startup)."""
