# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- picks the storage strategy from settings,
- builds the single TodosManager for the session.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import TodoCache
from ..core.todos_manager import TodosManager
from ..storage import create_cache

logger = logging.getLogger(__name__)


def build_cache(settings: Settings) -> TodoCache:
    """Raises StoragePathError if the durable store cannot resolve its file."""
    cache = create_cache(
        settings.storage_backend,
        filename=settings.todos_file,
        base_dir=settings.data_dir,
    )
    logger.info("Storage backend: %s", type(cache).__name__)
    return cache


def create_manager(*, settings: Settings | None = None) -> TodosManager:
    """
    Create the session's TodosManager.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    return TodosManager(build_cache(settings))
