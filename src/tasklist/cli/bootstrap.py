# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- picks the persistence backend,
- wires store, theme and notifier into AppState and loads persisted data.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import Notifier, PersistenceBackend
from ..core.state import AppState
from ..core.theme import ThemePreference
from ..storage.backends import JsonFileBackend, MemoryBackend, SQLiteBackend, StorageError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_backend(settings) -> PersistenceBackend:
    kind = getattr(settings, "backend", "json")
    if kind == "memory":
        return MemoryBackend()
    if kind == "sqlite":
        try:
            return SQLiteBackend(settings.store_path)
        except StorageError:
            logger.exception("SQLite store unavailable at %s; running without persistence.", settings.store_path)
            return MemoryBackend()
    return JsonFileBackend(settings.store_path)


def create_initial_state(*, settings=None, notifier: Notifier | None = None) -> AppState:
    """
    Create AppState from the provided settings and load persisted data.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    notifier = notifier or ConsoleNotifier()
    backend = create_backend(settings)

    store = TaskStore(backend, notifier=notifier)
    store.initialize()

    theme = ThemePreference(backend, notifier=notifier)
    theme.load()

    return AppState(
        settings=settings,
        backend=backend,
        notifier=notifier,
        store=store,
        theme=theme,
    )
