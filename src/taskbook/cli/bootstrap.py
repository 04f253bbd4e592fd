# src/taskbook/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- configures logging for the invocation,
- opens the task store the command will run against.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    console_level = level_from_name(settings.log_level)
    log_file = settings.log_file if settings.log_to_file else None
    setup_logging(console_level=console_level, log_file=log_file)


def open_store(*, settings: Settings | None = None, path: str | Path | None = None) -> TaskStore:
    """
    Load the task store for one invocation.

    An explicit path wins over settings.tasks_path; if neither settings nor
    path is given, falls back to get_settings().
    """
    if path is None:
        if settings is None:
            settings = get_settings()
        path = settings.tasks_path

    store = TaskStore.open(path)
    logger.debug("Opened task store %s (%d tasks)", store.path, len(store))
    return store
