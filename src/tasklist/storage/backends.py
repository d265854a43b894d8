# src/tasklist/storage/backends.py

"""
Key-value persistence backends.

Every backend exposes get(key) -> str | None and set(key, value) -> None.
Failures are raised as StorageError; callers decide whether to degrade.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Backend read/write failure (quota, unavailable, I/O)."""


class MemoryBackend:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileBackend:
    """
    All keys in a single JSON object file.

    Writes go to a sibling *.tmp file and are moved into place with os.replace,
    so a crash mid-write never leaves a truncated store behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except OSError as e:
            raise StorageError(f"cannot read {self._path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
            logger.exception("Store file %s is corrupt; treating it as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.error("Store file %s does not hold a JSON object; treating it as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"cannot write {self._path}: {e}") from e
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)


class SQLiteBackend:
    """
    SQLite key-value table.

    Each call opens its own short-lived connection.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"cannot create directory for {self._db_path}: {e}") from e
        self._ensure_schema()
        logger.info("SQLiteBackend ready db=%s", self._db_path)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise StorageError(f"cannot open {self._db_path}: {e}") from e
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"cannot create schema in {self._db_path}: {e}") from e
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"cannot read key {key!r}: {e}") from e
        return None if row is None else str(row[0])

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv(key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, value),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"cannot write key {key!r}: {e}") from e
