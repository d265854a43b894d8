# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from tasklist.storage.backends import MemoryBackend, StorageError


@dataclass(slots=True)
class FakeNotifier:
    """Collects notifier messages for assertions."""

    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


class RecordingBackend(MemoryBackend):
    """
    MemoryBackend that counts writes and can be switched into failure modes.

    - fail_writes: set() raises StorageError (quota exceeded, backend gone)
    - fail_reads: get() raises StorageError
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []
        self.fail_writes = False
        self.fail_reads = False

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("backend unavailable")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes.append((key, value))
        super().set(key, value)
