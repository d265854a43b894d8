# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.core.theme import ThemePreference
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeNotifier, RecordingBackend


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the adapters.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        backend="memory",
        store_path=tmp_path / "tasks.json",
        confirm_clear=True,
    )


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def store(backend: RecordingBackend, notifier: FakeNotifier) -> TaskStore:
    s = TaskStore(backend, notifier=notifier)
    s.initialize()
    return s


@pytest.fixture()
def state(settings, backend, notifier, store) -> AppState:
    """AppState wired with an in-memory backend and a collecting notifier."""
    return AppState(
        settings=settings,
        backend=backend,
        notifier=notifier,
        store=store,
        theme=ThemePreference(backend, notifier=notifier),
    )
