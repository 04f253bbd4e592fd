# src/taskbook/tasks/errors.py

"""Error kinds raised by the task store and the command dispatcher.

Every error carries the process exit code the CLI uses when it reaches the
top level.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class; exit_code is what the CLI exits with."""

    exit_code = 1


class InvalidInput(TaskError):
    """Malformed or missing argument, or an unparsable priority."""

    exit_code = 2


class NotFound(TaskError):
    """No task has the given title."""

    exit_code = 3

    def __init__(self, title: str) -> None:
        super().__init__(f"Task not found: {title!r}")
        self.title = title


class DuplicateTitle(TaskError):
    """A task with the given title already exists."""

    exit_code = 4

    def __init__(self, title: str) -> None:
        super().__init__(f"A task titled {title!r} already exists")
        self.title = title


class PersistenceError(TaskError):
    """Task file could not be read, parsed or written."""

    exit_code = 5
