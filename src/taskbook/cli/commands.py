# src/taskbook/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..config import Settings
from ..tasks.errors import InvalidInput, TaskError
from ..tasks.task_models import Task, TaskUpdate, parse_priority
from ..tasks.task_store import TaskStore
from .bootstrap import open_store

logger = logging.getLogger(__name__)

Params = Mapping[str, str | None]


@dataclass(slots=True)
class CommandResult:
    message: str | None = None
    tasks: list[Task] | None = None
    mutated: bool = False


CommandHandler = Callable[[TaskStore, Params], CommandResult]


@dataclass(slots=True)
class _Command:
    handler: CommandHandler
    help_text: str
    required: tuple[str, ...] = field(default_factory=tuple)


class CommandRegistry:
    """
    Maps command names ("add", "list-by-status", ...) to store operations.

    dispatch() runs exactly one command and saves the store afterwards
    only when the command changed it.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        required: tuple[str, ...] = (),
    ) -> None:
        self._commands[name.lower()] = _Command(handler, help_text, tuple(required))

    def names(self) -> list[str]:
        return list(self._commands)

    def help_text(self, name: str) -> str:
        return self._commands[name.lower()].help_text

    def dispatch(self, store: TaskStore, name: str, params: Params) -> CommandResult:
        cmd = self._commands.get(name.lower())
        if cmd is None:
            raise InvalidInput(f"Unknown command: {name}")

        missing = [p for p in cmd.required if params.get(p) is None]
        if missing:
            raise InvalidInput(f"{name}: missing required argument(s): {', '.join(missing)}")

        result = cmd.handler(store, params)
        if result.mutated:
            store.save()
        return result


registry = CommandRegistry()


def _str(params: Params, name: str) -> str:
    value = params.get(name)
    if value is None:
        raise InvalidInput(f"missing required argument: {name}")
    return value


def cmd_add(store: TaskStore, params: Params) -> CommandResult:
    priority = parse_priority(_str(params, "priority"))
    store.add(
        _str(params, "title"),
        _str(params, "description"),
        priority,
        _str(params, "status"),
        _str(params, "project"),
    )
    return CommandResult(message="Task added successfully!", mutated=True)


def cmd_remove(store: TaskStore, params: Params) -> CommandResult:
    store.remove(_str(params, "title"))
    return CommandResult(message="Task removed successfully!", mutated=True)


def cmd_list(store: TaskStore, params: Params) -> CommandResult:
    return CommandResult(tasks=store.list_tasks())


def cmd_list_by_project(store: TaskStore, params: Params) -> CommandResult:
    return CommandResult(tasks=store.list_by_category(_str(params, "project")))


def cmd_list_by_status(store: TaskStore, params: Params) -> CommandResult:
    return CommandResult(tasks=store.list_by_status(_str(params, "status")))


def cmd_list_by_priority(store: TaskStore, params: Params) -> CommandResult:
    priority = parse_priority(_str(params, "priority"))
    return CommandResult(tasks=store.list_by_priority(priority))


def cmd_search(store: TaskStore, params: Params) -> CommandResult:
    return CommandResult(tasks=store.search(_str(params, "query")))


def cmd_update(store: TaskStore, params: Params) -> CommandResult:
    raw_priority = params.get("priority")
    changes = TaskUpdate(
        description=params.get("description"),
        priority=None if raw_priority is None else parse_priority(raw_priority),
        status=params.get("status"),
        category=params.get("project"),
    )
    if changes.is_empty():
        raise InvalidInput(
            "update: provide at least one of --description, --priority, --status, --project"
        )
    store.update(_str(params, "title"), changes)
    return CommandResult(message="Task updated successfully!", mutated=True)


registry.register(
    "add",
    cmd_add,
    help_text="Add a new task.",
    required=("title", "description", "priority", "status", "project"),
)
registry.register("remove", cmd_remove, help_text="Remove a task.", required=("title",))
registry.register("list", cmd_list, help_text="List all tasks.")
registry.register(
    "list-by-project",
    cmd_list_by_project,
    help_text="List tasks by project.",
    required=("project",),
)
registry.register(
    "list-by-status",
    cmd_list_by_status,
    help_text="List tasks by status.",
    required=("status",),
)
registry.register(
    "list-by-priority",
    cmd_list_by_priority,
    help_text="List tasks by priority.",
    required=("priority",),
)
registry.register(
    "search",
    cmd_search,
    help_text="Search for tasks by title or description.",
    required=("query",),
)
registry.register("update", cmd_update, help_text="Update a task.", required=("title",))


def run_command(
    name: str,
    params: Params,
    *,
    settings: Settings | None = None,
    tasks_path: str | Path | None = None,
) -> CommandResult:
    """Load the store once, run one command, save if it mutated."""
    try:
        store = open_store(settings=settings, path=tasks_path)
        return registry.dispatch(store, name, params)
    except TaskError as exc:
        logger.info("Command %s failed: %s", name, exc)
        raise
