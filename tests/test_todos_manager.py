# tests/test_todos_manager.py

from __future__ import annotations

import pytest

from todo_cli.core.models import Todo
from todo_cli.core.todos_manager import TodosManager
from todo_cli.storage.json_cache import JSONFileCache

from .fakes import RecordingCache


def _titles(manager: TodosManager) -> list[str]:
    return [todo.title for _, todo in manager.list()]


def test_manager_loads_existing_todos_once() -> None:
    seeded = [Todo(title="a"), Todo(title="b", completed=True)]
    manager = TodosManager(RecordingCache(seeded))
    assert [(i, t.title, t.completed) for i, t in manager.list()] == [(1, "a", False), (2, "b", True)]


@pytest.mark.parametrize("n", [0, 1, 7])
def test_add_increments_count(manager: TodosManager, cache: RecordingCache, n: int) -> None:
    for i in range(n):
        manager.add(f"task {i}")

    entries = manager.list()
    assert len(entries) == n == len(manager)
    assert [i for i, _ in entries] == list(range(1, n + 1))
    if n:
        assert entries[-1][1].title == f"task {n - 1}"
    assert cache.saves == n
    assert cache.load() == [todo for _, todo in entries]


def test_add_accepts_empty_title_and_starts_incomplete(manager: TodosManager) -> None:
    todo = manager.add("")
    assert todo.title == ""
    assert todo.completed is False
    assert manager.list() == [(1, todo)]


def test_list_reflects_current_state(manager: TodosManager) -> None:
    manager.add("a")
    first = manager.list()
    manager.add("b")
    assert len(first) == 1
    assert _titles(manager) == ["a", "b"]


def test_toggle_is_involutive(manager: TodosManager, cache: RecordingCache) -> None:
    for title in ("a", "b", "c"):
        manager.add(title)
    before = [(t.id, t.completed) for _, t in manager.list()]

    assert manager.toggle(2).completed is True
    assert [t.completed for _, t in manager.list()] == [False, True, False]
    assert cache.load()[1].completed is True

    assert manager.toggle(2).completed is False
    assert [(t.id, t.completed) for _, t in manager.list()] == before


def test_delete_shifts_later_positions(manager: TodosManager) -> None:
    todos = [manager.add(title) for title in ("a", "b", "c", "d")]

    removed = manager.delete(2)
    assert removed is not None
    assert removed.id == todos[1].id

    entries = manager.list()
    assert [i for i, _ in entries] == [1, 2, 3]
    assert [t.id for _, t in entries] == [todos[0].id, todos[2].id, todos[3].id]
    assert _titles(manager) == ["a", "c", "d"]


def test_delete_last_and_only(manager: TodosManager, cache: RecordingCache) -> None:
    manager.add("only")
    assert manager.delete(1) is not None
    assert manager.list() == []
    assert cache.load() == []


@pytest.mark.parametrize("index", [0, -1, 3, 100])
def test_out_of_range_is_a_no_op(manager: TodosManager, cache: RecordingCache, index: int) -> None:
    manager.add("a")
    manager.add("b")
    saves = cache.saves
    snapshot = [(t.id, t.title, t.completed) for _, t in manager.list()]

    assert manager.toggle(index) is None
    assert manager.delete(index) is None

    assert [(t.id, t.title, t.completed) for _, t in manager.list()] == snapshot
    assert cache.saves == saves


def test_out_of_range_leaves_file_untouched(json_cache: JSONFileCache) -> None:
    manager = TodosManager(json_cache)
    manager.add("Buy milk")
    manager.toggle(1)
    before = json_cache.path.read_bytes()
    mtime = json_cache.path.stat().st_mtime_ns

    assert manager.toggle(2) is None
    assert manager.delete(0) is None

    assert json_cache.path.read_bytes() == before
    assert json_cache.path.stat().st_mtime_ns == mtime


def test_json_backed_manager_survives_restart(json_cache: JSONFileCache) -> None:
    manager = TodosManager(json_cache)
    a = manager.add("Buy milk")
    manager.add("Write spec")
    manager.toggle(2)
    manager.delete(1)

    restarted = TodosManager(JSONFileCache("todos.json", base_dir=json_cache.path.parent))
    entries = restarted.list()
    assert len(entries) == 1
    assert entries[0][1].title == "Write spec"
    assert entries[0][1].completed is True
    assert entries[0][1].id != a.id


def test_failed_save_keeps_in_memory_state() -> None:
    cache = RecordingCache(fail_saves=True)
    manager = TodosManager(cache)
    assert manager.last_save_ok is True

    manager.add("kept")
    assert manager.last_save_ok is False
    assert _titles(manager) == ["kept"]
    assert manager.toggle(1).completed is True

    cache.fail_saves = False
    manager.add("next")
    assert manager.last_save_ok is True
    assert [t.title for t in cache.load()] == ["kept", "next"]
