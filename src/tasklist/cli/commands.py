# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import EmptyInputError, TaskFilter, TaskNotFoundError

Confirmer = Callable[[str], bool]
CommandHandler = Callable[[AppState, str, Confirmer | None], str | None]

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Cannot add empty task"


@dataclass(frozen=True, slots=True)
class CommandResult:
    reply: str | None
    refresh: bool = False


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    refresh: bool


class CommandRegistry:
    """Slash-command registry that turns console input into TaskStore calls."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        refresh: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        cmd = _Command(handler=handler, refresh=refresh)
        self._commands[key] = cmd
        self._help[key] = help_text
        for alias in aliases:
            self._commands[alias.lower()] = cmd

    def handle(self, state: AppState, line: str, confirm: Confirmer | None = None) -> CommandResult | None:
        """
        Handle a string like "/command args".
        Returns None if the line is not a command.

        Everything after the command name is handed to the handler untouched,
        so /add keeps the raw text for the store to trim.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].partition(" ")
        name = name.strip().lower()
        if not name:
            return CommandResult("Empty command. Use /help to list available commands.")

        cmd = self._commands.get(name)
        if cmd is None:
            return CommandResult(f"Unknown command: /{name}. Use /help to list available commands.")

        return CommandResult(cmd.handler(state, rest, confirm), refresh=cmd.refresh)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _plural(n: int) -> str:
    return "" if n == 1 else "s"


def resolve_ref(state: AppState, ref: str) -> str:
    """
    Map a user reference to a task id.

    A number is a 1-based position in the current visible listing; anything
    else is taken as a literal task id.
    """
    ref = ref.strip()
    if ref.isdigit():
        visible = state.store.visible_tasks()
        pos = int(ref)
        if 1 <= pos <= len(visible):
            return visible[pos - 1].id
    return ref


def cmd_help(state: AppState, args: str, confirm: Confirmer | None = None) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: str, confirm: Confirmer | None = None) -> str | None:
    try:
        task = state.store.add_task(args)
    except EmptyInputError:
        state.notifier.notify(EMPTY_INPUT_MESSAGE)
        return None
    state.notifier.notify(f"Task added: {task.text}")
    return None


def cmd_toggle(state: AppState, args: str, confirm: Confirmer | None = None) -> str | None:
    if not args.strip():
        return "Usage: /toggle <number|id>"
    try:
        task = state.store.toggle_task(resolve_ref(state, args))
    except TaskNotFoundError as e:
        return f"No such task: {e.task_id}"
    status = "completed" if task.completed else "marked as active"
    state.notifier.notify(f"Task {status}: {task.text}")
    return None


def cmd_delete(state: AppState, args: str, confirm: Confirmer | None = None) -> str | None:
    if not args.strip():
        return "Usage: /delete <number|id>"
    try:
        task = state.store.delete_task(resolve_ref(state, args))
    except TaskNotFoundError as e:
        return f"No such task: {e.task_id}"
    state.notifier.notify(f"Task deleted: {task.text}")
    return None


def cmd_clear(state: AppState, args: str, confirm: Confirmer | None = None) -> str | None:
    pending = state.store.completed_count()
    if pending == 0:
        return "No completed tasks to clear."

    if confirm is not None and getattr(state.settings, "confirm_clear", True):
        if not confirm(f"Delete {pending} completed task{_plural(pending)}?"):
            logger.debug("Clear completed cancelled by user (pending=%d)", pending)
            return "Cancelled."

    removed = state.store.clear_completed()
    state.notifier.notify(f"{removed} completed task{_plural(removed)} deleted")
    return None


def cmd_filter(state: AppState, args: str, confirm: Confirmer | None = None) -> str | None:
    if not state.store.set_filter(args):
        choices = " | ".join(f.value for f in TaskFilter)
        return f"Usage: /filter {choices}"
    state.notifier.notify(f"Showing {state.store.current_filter.value} tasks")
    return None


def cmd_list(state: AppState, args: str, confirm: Confirmer | None = None) -> None:
    return None


def cmd_stats(state: AppState, args: str, confirm: Confirmer | None = None) -> str:
    s = state.store.stats()
    return f"Total: {s.total}  Active: {s.active}  Completed: {s.completed}"


def cmd_theme(state: AppState, args: str, confirm: Confirmer | None = None) -> None:
    enabled = state.theme.toggle()
    state.notifier.notify(f"Dark mode {'enabled' if enabled else 'disabled'}")
    return None


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"], refresh=True)
registry.register(
    "toggle", cmd_toggle, help_text="Flip completion: /toggle <number|id>.", aliases=["t", "done"], refresh=True
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <number|id>.", aliases=["rm", "d"], refresh=True)
registry.register("clear", cmd_clear, help_text="Delete all completed tasks (asks first).", refresh=True)
registry.register(
    "filter", cmd_filter, help_text="Change view: /filter all | active | completed.", aliases=["f"], refresh=True
)
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"], refresh=True)
registry.register("stats", cmd_stats, help_text="Show total / active / completed counts.")
registry.register("theme", cmd_theme, help_text="Toggle dark mode.")
