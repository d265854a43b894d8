# src/tasklist/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and UI adapters swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task, TaskFilter, TaskStats


class PersistenceBackend(Protocol):
    """
    Durable key-value surface.

    get() returns None for a missing key. Both methods raise StorageError
    (tasklist.storage.backends) when the backend itself fails.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class Notifier(Protocol):
    """Fire-and-forget status messages (added, deleted, save failed, ...)."""

    def notify(self, message: str) -> None: ...


class Presenter(Protocol):
    """
    Redraws the list after a mutation.

    Refresh is pull-based: the caller of a store operation fetches
    visible_tasks() and stats() and hands them over here.
    """

    def render(self, tasks: list[Task], stats: TaskStats, current_filter: TaskFilter) -> None: ...
