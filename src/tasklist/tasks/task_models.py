# src/tasklist/tasks/task_models.py

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum

_BASE36 = string.digits + string.ascii_lowercase


class TaskFilter(StrEnum):
    """View selector over the task collection."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object) -> TaskFilter | None:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: str
    text: str
    completed: bool
    created_at: str


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    active: int
    completed: int


class TaskError(Exception):
    """Base class for errors returned to the caller of a TaskStore operation."""


class EmptyInputError(TaskError, ValueError):
    def __init__(self) -> None:
        super().__init__("Task text is empty")


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"No task with id {task_id!r}")
        self.task_id = task_id


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    out: list[str] = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_BASE36[rem])
    return "".join(reversed(out))


def new_task_id() -> str:
    """
    Millisecond timestamp plus ~64 random bits, both base-36.

    No counter is involved, so independent writers can mint ids without coordination.
    """
    stamp = _to_base36(time.time_ns() // 1_000_000)
    noise = _to_base36(secrets.randbits(64)).rjust(13, "0")
    return stamp + noise


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
