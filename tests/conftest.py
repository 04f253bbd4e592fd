# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from taskbook.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    """Empty store backed by a per-test file that does not exist yet."""
    return TaskStore.open(tasks_path)


@pytest.fixture()
def populated_store(store: TaskStore) -> TaskStore:
    store.add("Write report", "Quarterly summary", 2, "To Do", "Work")
    store.add("Buy milk", "", 1, "To Do", "Home")
    store.add("Fix bike", "Rear brake squeaks", 3, "In Progress", "Home")
    return store


@pytest.fixture()
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, tasks_path: Path) -> Path:
    """
    Isolated environment for CLI runs.

    Points every TASKBOOK_* path into tmp_path so tests never touch the
    working directory, and returns the task file path.
    """
    monkeypatch.setenv("TASKBOOK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASKBOOK_TASKS_PATH", str(tasks_path))
    monkeypatch.setenv("TASKBOOK_LOG_LEVEL", "CRITICAL")
    monkeypatch.setenv("TASKBOOK_LOG_TO_FILE", "false")
    return tasks_path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
