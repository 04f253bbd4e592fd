# src/taskbook/tasks/__init__.py

from .errors import DuplicateTitle, InvalidInput, NotFound, PersistenceError, TaskError
from .task_models import Task, TaskUpdate
from .task_store import TaskStore

__all__ = [
    "DuplicateTitle",
    "InvalidInput",
    "NotFound",
    "PersistenceError",
    "Task",
    "TaskError",
    "TaskStore",
    "TaskUpdate",
]
