# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import Notifier, PersistenceBackend
from .theme import ThemePreference


@dataclass
class AppState:
    # Settings are kept on the state so adapters can read them without importing config.
    settings: Any

    backend: PersistenceBackend
    notifier: Notifier
    store: TaskStore
    theme: ThemePreference
