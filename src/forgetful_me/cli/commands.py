# src/forgetful_me/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import date
from typing import cast

from ..connectors.console_render import format_status_summary, format_task_list
from ..core.ports import Emitter, Prompt
from ..core.state import AppState
from ..tasks.task_models import DESCRIPTION_CHAR_LIMIT, NAME_CHAR_LIMIT, TaskStatus

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[[AppState, list[str], Prompt | None, Emitter], str]
CommandHandler = CommandHandler2 | CommandHandler4

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple command registry used by the console loop (/add, /list, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Prompt | None = None,
        emit: Emitter = print,
    ) -> str | None:
        """
        Handle a string like "/command args" (the leading slash is optional).
        Returns a reply string or None for an empty line.
        """
        parts = line.strip().removeprefix("/").split()
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, ask, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_ids(args: list[str]) -> list[int] | None:
    """
    Parse "0 2", "0,2" or "ID:0" style arguments into task ids.
    Returns None if any token is not a non-negative integer.
    """
    ids: list[int] = []
    for arg in args:
        for token in arg.split(","):
            token = token.strip().upper().removeprefix("ID:")
            if not token:
                continue
            if not token.isdecimal():
                return None
            ids.append(int(token))
    return ids


def last_deadline_day(today: date) -> date:
    """Latest deadline the prompt accepts: December 31 of next year."""
    return date(today.year + 1, 12, 31)


def _ask_text(ask: Prompt, emit: Emitter, prompt: str, label: str, limit: int) -> str:
    while True:
        text = ask(prompt).strip()
        if len(text) <= limit:
            return text
        emit(f"{label} must be {limit} characters or less. Current: {len(text)}.")


def _ask_yes_no(ask: Prompt, emit: Emitter, prompt: str, default: bool) -> bool:
    while True:
        raw = ask(prompt).strip().lower()
        if not raw:
            return default
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        emit("Please answer y or n.")


def _ask_deadline(ask: Prompt, emit: Emitter, today: date) -> date:
    latest = last_deadline_day(today)
    while True:
        raw = ask(f"Choose Task Deadline (YYYY-MM-DD) [{today.isoformat()}]: ").strip()
        if not raw:
            return today
        try:
            chosen = date.fromisoformat(raw)
        except ValueError:
            emit(f"Not a date: {raw!r}. Use YYYY-MM-DD.")
            continue
        if chosen < today or chosen > latest:
            emit(f"Deadline must be between {today.isoformat()} and {latest.isoformat()}.")
            continue
        return chosen


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], ask: Prompt | None = None, emit: Emitter = print) -> str:
    """
    /add -> prompt for name, description and an optional deadline
    """
    if ask is None:
        return "Adding a task needs interactive input."

    today = state.today()
    try:
        name = _ask_text(ask, emit, "Task Name: ", "Task name", NAME_CHAR_LIMIT)
        description = _ask_text(ask, emit, "Task Description: ", "Task description", DESCRIPTION_CHAR_LIMIT)
        deadline: date | None = None
        if _ask_yes_no(ask, emit, "Does the task have a deadline? [Y/n]: ", default=True):
            deadline = _ask_deadline(ask, emit, today)
    except (EOFError, KeyboardInterrupt):
        logger.debug("Task creation cancelled by user.")
        return "Cancelled, no task added."

    task = state.task_store.create(name, description, deadline)
    return f"Added task ID:{task.id} {task.name!r}."


def _apply_to_ids(
    state: AppState,
    args: list[str],
    *,
    usage: str,
    action: Callable[[list[int]], int],
    verb: str,
    note: str = "",
) -> str:
    if not args:
        return usage
    ids = parse_ids(args)
    if ids is None or not ids:
        return usage
    if not state.task_store.list():
        return "Task List Empty!"

    done = action(ids)
    skipped = len(set(ids)) - done
    reply = f"{verb} {done} task(s)."
    if skipped:
        reply += f" Skipped {skipped} unknown id(s)."
    if done and note:
        reply += f" {note}"
    return reply


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm 0 2 -> delete tasks 0 and 2; the remaining tasks are renumbered
    """
    return _apply_to_ids(
        state,
        args,
        usage="Usage: /rm <id> [<id> ...]",
        action=state.task_store.delete,
        verb="Removed",
        note="Task ids have been renumbered.",
    )


def cmd_mark(state: AppState, args: list[str]) -> str:
    """
    /mark 1 -> switch task 1 between Incomplete and Complete
    """
    return _apply_to_ids(
        state,
        args,
        usage="Usage: /mark <id> [<id> ...]",
        action=state.task_store.toggle_status,
        verb="Switched",
    )


_LIST_FILTERS: dict[str, TaskStatus | None] = {
    "all": None,
    "incomplete": TaskStatus.INCOMPLETE,
    "todo": TaskStatus.INCOMPLETE,
    "open": TaskStatus.INCOMPLETE,
    "complete": TaskStatus.COMPLETE,
    "completed": TaskStatus.COMPLETE,
    "done": TaskStatus.COMPLETE,
}


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list              -> all tasks
    /list incomplete   -> only incomplete tasks
    /list complete     -> only completed tasks
    """
    key = args[0].lower() if args else "all"
    if key not in _LIST_FILTERS:
        return "Usage: /list [all|incomplete|complete]"
    wanted = _LIST_FILTERS[key]

    tasks = state.task_store.list()
    if wanted is not None:
        tasks = [t for t in tasks if t.status is wanted]

    if not tasks:
        if wanted is TaskStatus.INCOMPLETE:
            return "No Incomplete Tasks!"
        if wanted is TaskStatus.COMPLETE:
            return "No Complete Tasks!"
        return "Task List Empty!"

    return format_task_list(tasks, state.today(), enabled=state.color)


def cmd_status(state: AppState, args: list[str]) -> str:
    return format_status_summary(state.task_store.list(), state.today(), enabled=state.color)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task (prompts for details).", aliases=["new"])
registry.register("rm", cmd_rm, help_text="Remove tasks: /rm <id> [<id> ...].", aliases=["remove", "del"])
registry.register(
    "mark", cmd_mark, help_text="Mark tasks Incomplete/Complete: /mark <id> [<id> ...].", aliases=["toggle"]
)
registry.register("list", cmd_list, help_text="View tasks: /list [all|incomplete|complete].", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show completed/incomplete counts and deadline colors.")
