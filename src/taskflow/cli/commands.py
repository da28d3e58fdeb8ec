# src/taskflow/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.state import AppState
from ..tasks.task_models import StatusFilter, TaskResult
from . import render

logger = logging.getLogger(__name__)


class ReplyKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class CommandReply:
    text: str
    kind: ReplyKind = ReplyKind.INFO
    exit: bool = False


CommandHandler = Callable[[AppState, str], CommandReply]

MSG_UNKNOWN = "Unknown command. Type 'help' for available commands."
MSG_NEED_TITLE = "Please provide a task title."
MSG_NEED_ID = "Please provide a task ID."

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class _Entry:
    usage: str
    help_text: str


class CommandRegistry:
    """Keyword -> handler table used by the console loop (add, list, help, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._entries: list[_Entry] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        self._entries.append(_Entry(usage, help_text))
        for alias in aliases:
            self._handlers[alias] = handler

    def handle(self, state: AppState, line: str) -> CommandReply | None:
        """
        Handle a line like "add Write report".
        Returns None for a blank line, otherwise the reply to show.
        Keywords are case-sensitive.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None

        name = parts[0]
        arg = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command: %r", name)
            return CommandReply(MSG_UNKNOWN, ReplyKind.ERROR)

        return handler(state, arg)

    def help_entries(self) -> list[tuple[str, str]]:
        return [(e.usage, e.help_text) for e in self._entries]

    def build_help(self, state: AppState) -> str:
        app_name = str(getattr(state.settings, "app_name", "TaskFlow"))
        return render.format_help(self.help_entries(), title=app_name, color=state.color)


registry = CommandRegistry()


def parse_task_id(arg: str) -> int | None:
    """First token of arg as a decimal id (ASCII digits, optional sign), or None."""
    parts = arg.split(maxsplit=1)
    if not parts or not _TASK_ID_RE.fullmatch(parts[0]):
        return None
    return int(parts[0])


def _not_found(task_id: int) -> CommandReply:
    return CommandReply(f"{render.MARK_FAIL} Task #{task_id} not found.", ReplyKind.ERROR)


def cmd_add(state: AppState, arg: str) -> CommandReply:
    if not arg.strip():
        return CommandReply(MSG_NEED_TITLE, ReplyKind.ERROR)
    task_id = state.registry.add_task(arg)
    return CommandReply(f"{render.MARK_DONE} Task #{task_id} added successfully!", ReplyKind.SUCCESS)


def cmd_list(state: AppState, arg: str) -> CommandReply:
    tasks = state.registry.list_tasks(StatusFilter.ACTIVE)
    if tasks is None:
        return CommandReply("No tasks found.", ReplyKind.WARNING)
    return CommandReply(render.format_task_list(tasks, color=state.color))


def cmd_complete(state: AppState, arg: str) -> CommandReply:
    task_id = parse_task_id(arg)
    if task_id is None:
        return CommandReply(MSG_NEED_ID, ReplyKind.ERROR)
    if state.registry.complete_task(task_id) is TaskResult.NOT_FOUND:
        return _not_found(task_id)
    return CommandReply(f"{render.MARK_DONE} Task #{task_id} completed!", ReplyKind.SUCCESS)


def cmd_delete(state: AppState, arg: str) -> CommandReply:
    task_id = parse_task_id(arg)
    if task_id is None:
        return CommandReply(MSG_NEED_ID, ReplyKind.ERROR)
    if state.registry.delete_task(task_id) is TaskResult.NOT_FOUND:
        return _not_found(task_id)
    return CommandReply(f"{render.MARK_DONE} Task #{task_id} deleted!", ReplyKind.SUCCESS)


def cmd_stats(state: AppState, arg: str) -> CommandReply:
    stats = state.registry.compute_stats()
    return CommandReply(render.format_stats(stats, color=state.color))


def cmd_help(state: AppState, arg: str) -> CommandReply:
    return CommandReply(registry.build_help(state))


def cmd_exit(state: AppState, arg: str) -> CommandReply:
    return CommandReply("Goodbye!", exit=True)


registry.register("add", cmd_add, "add <title>", "Add new task")
registry.register("list", cmd_list, "list", "Show all active tasks")
registry.register("complete", cmd_complete, "complete <id>", "Mark task as completed")
registry.register("delete", cmd_delete, "delete <id>", "Delete task")
registry.register("stats", cmd_stats, "stats", "Show statistics")
registry.register("help", cmd_help, "help", "Show this help")
registry.register("exit", cmd_exit, "exit | quit", "Exit program", aliases=["quit"])
