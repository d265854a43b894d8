# src/tasklist/core/theme.py

from __future__ import annotations

import logging

from ..storage.backends import StorageError
from .ports import Notifier, PersistenceBackend

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"


class ThemePreference:
    """Dark-mode flag stored as "true"/"false" next to the task collection."""

    def __init__(self, backend: PersistenceBackend, *, notifier: Notifier | None = None) -> None:
        self._backend = backend
        self._notifier = notifier
        self.dark_mode = False

    def load(self) -> bool:
        try:
            raw = self._backend.get(DARK_MODE_KEY)
        except StorageError:
            logger.exception("Failed to read theme preference.")
            raw = None
        self.dark_mode = raw == "true"
        return self.dark_mode

    def toggle(self) -> bool:
        self.dark_mode = not self.dark_mode
        try:
            self._backend.set(DARK_MODE_KEY, "true" if self.dark_mode else "false")
        except StorageError:
            logger.exception("Failed to save theme preference.")
            if self._notifier is not None:
                self._notifier.notify("Error saving theme preference")
        return self.dark_mode
