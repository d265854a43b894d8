# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKLIST_APP_NAME",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_DATA_DIR",
        "TASKLIST_BACKEND",
        "TASKLIST_STORE_PATH",
        "TASKLIST_CONFIRM_CLEAR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.backend == "json"
    assert s.store_path == Path(".local/tasklist") / "tasks.json"
    assert s.confirm_clear is True


def test_sqlite_backend_changes_default_store_name(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKLIST_BACKEND", "SQLite")
    monkeypatch.setenv("TASKLIST_CONFIRM_CLEAR", "off")

    s = Settings.from_env()

    assert s.backend == "sqlite"
    assert s.store_path == tmp_path / "tasks.sqlite3"
    assert s.confirm_clear is False


def test_unknown_backend_falls_back_to_json(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_BACKEND", "redis")
    monkeypatch.setenv("TASKLIST_STORE_PATH", str(tmp_path / "custom.json"))

    s = Settings.from_env()

    assert s.backend == "json"
    assert s.store_path == tmp_path / "custom.json"
