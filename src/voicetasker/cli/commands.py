# src/voicetasker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..actions.executor import execute_action
from ..actions.models import CompleteTask, DeleteTask, ListTasks
from ..core.state import AppState
from ..tasks.task_models import StatusFilter

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Command /%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    hist = "ON" if state.save_history else "OFF"
    models = ", ".join(list(getattr(state.settings, "llm_models", []) or []))
    store = state.task_store
    total = store.count_tasks()
    pending = len(store.list_tasks(StatusFilter.PENDING))
    return (
        "Status:\n"
        f"  LLM client: {type(state.llm).__name__}\n"
        f"  Dialog history: {hist}\n"
        f"  Models (priority -> fallback): {models}\n"
        f"  Tasks: {total} total, {pending} pending"
    )


def cmd_tasks(state: AppState, args: list[str]) -> str:
    """
    /tasks            -> all tasks
    /tasks pending    -> pending only
    /tasks completed  -> completed only
    """
    status_filter = StatusFilter.parse(args[0] if args else None)
    return execute_action(state.task_store, ListTasks(status_filter=status_filter))


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <part of the task title>"
    return execute_action(state.task_store, CompleteTask(identifier=" ".join(args)))


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <part of the task title>"
    return execute_action(state.task_store, DeleteTask(identifier=" ".join(args)))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current settings and task counts.")
registry.register(
    "tasks", cmd_tasks, help_text="List tasks: /tasks [all|pending|completed].", aliases=["ls"]
)
registry.register("done", cmd_done, help_text="Mark a task complete: /done <title part>.")
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <title part>.", aliases=["rm"]
)
