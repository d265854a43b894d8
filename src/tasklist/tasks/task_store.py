# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..storage.backends import StorageError
from .task_codec import TaskDecodeError, decode_tasks, encode_tasks
from .task_models import (
    EmptyInputError,
    Task,
    TaskFilter,
    TaskNotFoundError,
    TaskStats,
    new_task_id,
    utc_now_iso,
)

if TYPE_CHECKING:
    from ..core.ports import Notifier, PersistenceBackend

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"

SAVE_FAILED_MESSAGE = "Error saving tasks"
LOAD_FAILED_MESSAGE = "Error loading tasks"


class TaskStore:
    """
    In-memory task collection backed by a key-value store.

    - tasks are kept newest-first; add_task inserts at index 0
    - every state-changing mutation persists the whole collection once
    - persistence failures are logged and reported via the notifier;
      the in-memory collection stays authoritative
    - the current filter is session-only and never persisted
    """

    def __init__(
        self,
        backend: PersistenceBackend,
        *,
        notifier: Notifier | None = None,
        key: str = TASKS_KEY,
    ) -> None:
        self._backend = backend
        self._notifier = notifier
        self._key = key
        self._tasks: list[Task] = []
        self._filter = TaskFilter.ALL

    # ---- persistence ----

    def load(self) -> list[Task]:
        """Read the stored collection. Missing or corrupt data yields []."""
        try:
            blob = self._backend.get(self._key)
        except StorageError:
            logger.exception("Failed to read tasks from backend key=%s", self._key)
            self._notify(LOAD_FAILED_MESSAGE)
            return []

        if blob is None:
            logger.info("No stored tasks under key=%s (first run).", self._key)
            return []

        try:
            return decode_tasks(blob)
        except TaskDecodeError:
            logger.exception("Stored tasks are corrupt; starting with an empty list.")
            self._notify(LOAD_FAILED_MESSAGE)
            return []

    def save(self) -> bool:
        """Write the whole collection. Returns False if the backend rejected it."""
        try:
            self._backend.set(self._key, encode_tasks(self._tasks))
        except StorageError:
            logger.exception("Failed to save %d tasks; keeping changes in memory only.", len(self._tasks))
            self._notify(SAVE_FAILED_MESSAGE)
            return False
        return True

    def initialize(self) -> list[Task]:
        self._tasks = self.load()
        self._filter = TaskFilter.ALL
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))
        return list(self._tasks)

    def _notify(self, message: str) -> None:
        if self._notifier is not None:
            self._notifier.notify(message)

    # ---- lookups ----

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1

    def get_task(self, task_id: str) -> Task | None:
        i = self._index_of(task_id)
        return self._tasks[i] if i >= 0 else None

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def current_filter(self) -> TaskFilter:
        return self._filter

    # ---- mutations ----

    def add_task(self, raw_text: str) -> Task:
        text = (raw_text or "").strip()
        if not text:
            raise EmptyInputError()

        task_id = new_task_id()
        while self._index_of(task_id) >= 0:
            task_id = new_task_id()

        task = Task(id=task_id, text=text, completed=False, created_at=utc_now_iso())
        self._tasks.insert(0, task)
        self.save()
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        return task

    def toggle_task(self, task_id: str) -> Task:
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        task.completed = not task.completed
        self.save()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete_task(self, task_id: str) -> Task:
        i = self._index_of(task_id)
        if i < 0:
            raise TaskNotFoundError(task_id)

        task = self._tasks.pop(i)
        self.save()
        logger.debug("Task deleted id=%s total=%d", task.id, len(self._tasks))
        return task

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def clear_completed(self) -> int:
        """
        Drop every completed task in one step.

        Callers are expected to confirm with the user first when the count is
        non-zero. A zero count is a no-op and does not touch the backend.
        """
        removed = self.completed_count()
        if removed == 0:
            return 0

        self._tasks = [t for t in self._tasks if not t.completed]
        self.save()
        logger.debug("Cleared %d completed tasks total=%d", removed, len(self._tasks))
        return removed

    def set_filter(self, value: TaskFilter | str) -> bool:
        parsed = TaskFilter.parse(value)
        if parsed is None:
            logger.debug("Ignoring unknown filter %r", value)
            return False
        self._filter = parsed
        return True

    # ---- derived views ----

    def visible_tasks(self) -> list[Task]:
        if self._filter is TaskFilter.ACTIVE:
            return [t for t in self._tasks if not t.completed]
        if self._filter is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.completed]
        return list(self._tasks)

    def stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = self.completed_count()
        return TaskStats(total=total, active=total - completed, completed=completed)
