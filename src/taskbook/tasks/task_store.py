# src/taskbook/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .errors import DuplicateTitle, NotFound, PersistenceError
from .task_models import Task, TaskUpdate, validate_priority, validate_text, validate_title

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory:
    - load() reads the file once (missing or blank file -> empty store)
    - mutations only touch the in-memory list
    - save() rewrites the file (temp file + os.replace)

    Titles are unique. Every mutating method validates its input before
    changing anything, so a failed call leaves the store as it was.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []

    @classmethod
    def open(cls, path: str | Path) -> TaskStore:
        store = cls(path)
        store.load()
        return store

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- persistence ----

    def load(self) -> None:
        try:
            text = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("Task file %s not found; starting empty.", self._path)
            self._tasks = []
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read task file {self._path}: {exc}") from exc

        if not text.strip():
            self._tasks = []
            return

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise PersistenceError(f"Task file {self._path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise PersistenceError(f"Task file {self._path} must contain a JSON array")

        tasks: list[Task] = []
        seen: set[str] = set()
        for i, raw in enumerate(data):
            try:
                task = Task.from_dict(raw)
            except ValueError as exc:
                raise PersistenceError(
                    f"Task file {self._path}: record {i} is invalid: {exc}"
                ) from exc
            if task.title in seen:
                raise PersistenceError(
                    f"Task file {self._path}: duplicate title {task.title!r}"
                )
            seen.add(task.title)
            tasks.append(task)

        self._tasks = tasks
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)

    def save(self) -> None:
        payload = json.dumps(
            [t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2
        )
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except (OSError, ValueError) as exc:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise PersistenceError(f"Cannot write task file {self._path}: {exc}") from exc
        logger.info("Saved %d tasks to %s", len(self._tasks), self._path)

    # ---- lookup ----

    def _index_of(self, title: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.title == title:
                return i
        return None

    def find(self, title: str) -> Task | None:
        i = self._index_of(title)
        return None if i is None else self._tasks[i]

    # ---- mutations ----

    def add(
        self,
        title: str,
        description: str,
        priority: int,
        status: str,
        category: str,
    ) -> Task:
        validate_title(title)
        validate_priority(priority)
        for name, value in (
            ("description", description),
            ("status", status),
            ("category", category),
        ):
            validate_text(name, value)
        if self._index_of(title) is not None:
            raise DuplicateTitle(title)

        task = Task(
            title=title,
            description=description,
            priority=priority,
            status=status,
            category=category,
        )
        self._tasks.append(task)
        logger.debug("Task added title=%r priority=%s status=%r", title, priority, status)
        return task

    def remove(self, title: str) -> Task:
        i = self._index_of(title)
        if i is None:
            raise NotFound(title)
        task = self._tasks.pop(i)
        logger.debug("Task removed title=%r", title)
        return task

    def update(self, title: str, changes: TaskUpdate) -> Task:
        task = self.find(title)
        if task is None:
            raise NotFound(title)
        changes.validate()
        if changes.is_empty():
            return task
        changes.apply_to(task)
        logger.debug("Task updated title=%r fields=%s", title, sorted(changes.changed_fields()))
        return task

    # ---- queries ----

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def list_by_category(self, category: str) -> list[Task]:
        return [t for t in self._tasks if t.category == category]

    def list_by_status(self, status: str) -> list[Task]:
        return [t for t in self._tasks if t.status == status]

    def list_by_priority(self, priority: int) -> list[Task]:
        return [t for t in self._tasks if t.priority == priority]

    def search(self, query: str) -> list[Task]:
        """
        Case-insensitive substring match on title or description.
        An empty query matches every task.
        """
        needle = query.casefold()
        return [
            t
            for t in self._tasks
            if needle in t.title.casefold() or needle in t.description.casefold()
        ]
