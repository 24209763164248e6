"""
Storage strategies for todos.

- memory_cache.py: InMemoryCache (volatile, process lifetime only)
- json_cache.py: JSONFileCache (durable, todos.json in the working directory)
"""

from __future__ import annotations

from pathlib import Path

from ..core.ports import TodoCache
from .json_cache import DEFAULT_FILENAME, JSONFileCache
from .memory_cache import InMemoryCache

BACKENDS = ("json", "memory")


def create_cache(
    backend: str = "json",
    *,
    filename: str = DEFAULT_FILENAME,
    base_dir: str | Path | None = None,
) -> TodoCache:
    key = backend.strip().lower()
    if key == "json":
        return JSONFileCache(filename, base_dir=base_dir)
    if key == "memory":
        return InMemoryCache()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of: {', '.join(BACKENDS)}")


__all__ = ["BACKENDS", "DEFAULT_FILENAME", "InMemoryCache", "JSONFileCache", "create_cache"]
