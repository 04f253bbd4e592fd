# src/taskbook/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

NO_TASKS_MESSAGE = "No tasks found."


def format_task(index: int, task: Task) -> str:
    return "\n".join(
        [
            f"Task {index}: {task.title}",
            f"  Description: {task.description}",
            f"  Priority:    {task.priority}",
            f"  Status:      {task.status}",
            f"  Project:     {task.category}",
        ]
    )


def format_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return NO_TASKS_MESSAGE
    return "\n".join(format_task(i, t) for i, t in enumerate(tasks, start=1))
