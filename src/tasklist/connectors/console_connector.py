# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.ports import Presenter
from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter, TaskStats

logger = logging.getLogger(__name__)

EMPTY_MESSAGES = {
    TaskFilter.ALL: "No tasks yet. Add one above to get started!",
    TaskFilter.ACTIVE: "No active tasks. Great job!",
    TaskFilter.COMPLETED: "No completed tasks yet.",
}

Writer = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotifier:
    """Prints status messages with a local timestamp."""

    def __init__(self, write: Writer = print) -> None:
        self._write = write

    def notify(self, message: str) -> None:
        self._write(f"[{_ts_local()}] {message}")


class ConsolePresenter:
    def __init__(self, write: Writer = print) -> None:
        self._write = write

    def render(self, tasks: list[Task], stats: TaskStats, current_filter: TaskFilter) -> None:
        self._write(f"--- {current_filter.value} ---")
        if not tasks:
            self._write(EMPTY_MESSAGES[current_filter])
        for i, t in enumerate(tasks, start=1):
            marker = "[x]" if t.completed else "[ ]"
            self._write(f"{i:>3}. {marker} {t.text}")
        self._write(f"Total: {stats.total}  Active: {stats.active}  Completed: {stats.completed}")


def prompt_yes_no(question: str) -> bool:
    """Simple y/N terminal prompt."""
    try:
        ans = input(f"{question} [y/N]: ").strip().lower()
    except EOFError:
        return False
    return ans in ("y", "yes")


def refresh(state: AppState, presenter: Presenter) -> None:
    store = state.store
    presenter.render(store.visible_tasks(), store.stats(), store.current_filter)


def handle_line(
    state: AppState,
    line: str,
    presenter: Presenter,
    *,
    confirm: Callable[[str], bool] = prompt_yes_no,
    write: Writer = print,
) -> None:
    """One REPL step. A line without a leading slash is added as a task."""
    if not line.startswith("/"):
        line = "/add " + line

    try:
        result = command_registry.handle(state, line, confirm=confirm)
    except Exception:
        logger.exception("Command handler crashed.")
        write(f"[{_ts_local()}] Internal error while handling a command.")
        return

    if result is None:
        return
    if result.reply:
        write(result.reply)
    if result.refresh:
        refresh(state, presenter)


def run_console_loop(state: AppState, presenter: Presenter | None = None) -> None:
    presenter = presenter or ConsolePresenter()
    app_name = str(getattr(state.settings, "app_name", "tasklist"))

    logger.info("Console connector started.")
    print(f"[{_ts_local()}] [{app_name}] Type a task to add it. Use /help for commands, /exit to quit.\n")
    refresh(state, presenter)

    while True:
        try:
            raw = input("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        stripped = raw.strip()
        if not stripped:
            continue
        if stripped.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Keep the raw line (minus the newline) so /add sees untrimmed text.
        handle_line(state, raw if raw.startswith("/") else stripped, presenter)

    logger.info("Console connector finished.")
