# src/tasklist/tasks/task_codec.py

"""
JSON wire format for the task collection.

A JSON array of objects with the fields id, text, completed and createdAt,
in store order (newest first).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskDecodeError(ValueError):
    """Stored blob is not a JSON array."""


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": task.created_at,
    }


def encode_tasks(tasks: list[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def _dict_to_task(raw: Any) -> Task | None:
    if not isinstance(raw, dict):
        return None
    task_id = raw.get("id")
    text = raw.get("text")
    if not isinstance(task_id, str) or not task_id:
        return None
    if not isinstance(text, str) or not text.strip():
        return None
    created_at = raw.get("createdAt")
    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        logger.warning("Stored task id=%s has non-boolean completed=%r; treating it as active", task_id, completed)
    return Task(
        id=task_id,
        text=text.strip(),
        completed=completed is True,
        created_at=str(created_at) if created_at is not None else "",
    )


def decode_tasks(blob: str) -> list[Task]:
    """
    Parse a stored blob.

    Raises TaskDecodeError when the blob is not a JSON array. Entries that would
    break store invariants (missing id, blank text, repeated id) are skipped.
    """
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise TaskDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a JSON array, got {type(data).__name__}")

    out: list[Task] = []
    seen: set[str] = set()
    for i, item in enumerate(data):
        task = _dict_to_task(item)
        if task is None:
            logger.warning("Skipping malformed stored task at index %d", i)
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate stored task id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out
