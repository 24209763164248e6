# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.config import Settings
from todo_cli.core.todos_manager import TodosManager
from todo_cli.storage.json_cache import JSONFileCache

from .fakes import RecordingCache


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing every path at tmp_path.

    Built directly instead of from the environment to keep unit tests isolated.
    """
    return Settings(
        app_name="todo-test",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        storage_backend="json",
        todos_file="todos.json",
        data_dir=tmp_path,
    )


@pytest.fixture()
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture()
def manager(cache: RecordingCache) -> TodosManager:
    return TodosManager(cache)


@pytest.fixture()
def json_cache(tmp_path: Path) -> JSONFileCache:
    return JSONFileCache("todos.json", base_dir=tmp_path)
