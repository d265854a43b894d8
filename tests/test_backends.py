# tests/test_backends.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasklist.storage.backends import JsonFileBackend, MemoryBackend, SQLiteBackend, StorageError
from tasklist.tasks.task_store import TaskStore


@pytest.fixture(params=["memory", "json", "sqlite"])
def any_backend(request, tmp_path: Path):
    if request.param == "memory":
        return MemoryBackend()
    if request.param == "json":
        return JsonFileBackend(tmp_path / "store.json")
    return SQLiteBackend(tmp_path / "store.sqlite3")


def test_get_missing_key_returns_none(any_backend) -> None:
    assert any_backend.get("tasks") is None


def test_set_overwrites_and_keeps_other_keys(any_backend) -> None:
    any_backend.set("tasks", "[]")
    any_backend.set("darkMode", "true")
    any_backend.set("tasks", "[1]")

    assert any_backend.get("tasks") == "[1]"
    assert any_backend.get("darkMode") == "true"


def test_json_file_survives_reopen(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    JsonFileBackend(path).set("tasks", "[]")

    assert JsonFileBackend(path).get("tasks") == "[]"
    assert not path.with_suffix(".tmp").exists()
    assert json.loads(path.read_text("utf-8")) == {"tasks": "[]"}


def test_json_file_corrupt_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", "utf-8")
    backend = JsonFileBackend(path)

    assert backend.get("tasks") is None
    backend.set("tasks", "[]")
    assert backend.get("tasks") == "[]"


def test_json_file_undecodable_bytes_read_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_bytes(b"{\"tasks\": \"\xff\xfe\"}")
    backend = JsonFileBackend(path)

    assert backend.get("tasks") is None
    assert TaskStore(backend).initialize() == []
    backend.set("tasks", "[]")
    assert backend.get("tasks") == "[]"


def test_json_file_write_failure_raises_storage_error(tmp_path: Path) -> None:
    # a directory where the store file should be makes every write fail
    path = tmp_path / "store.json"
    path.mkdir()
    backend = JsonFileBackend(path)

    with pytest.raises(StorageError):
        backend.set("tasks", "[]")


def test_sqlite_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "store.sqlite3"
    SQLiteBackend(db).set("tasks", "[\"x\"]")

    assert SQLiteBackend(db).get("tasks") == "[\"x\"]"


def test_store_roundtrip_through_json_file(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    first = TaskStore(JsonFileBackend(path))
    first.initialize()
    first.add_task("Buy milk")
    walk = first.add_task("Walk dog")
    first.toggle_task(walk.id)

    second = TaskStore(JsonFileBackend(path))

    assert second.initialize() == first.tasks


def test_sqlite_unusable_directory_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")

    with pytest.raises(StorageError):
        SQLiteBackend(blocker / "store.sqlite3")
