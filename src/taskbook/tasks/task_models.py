# src/taskbook/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from .errors import InvalidInput

MIN_PRIORITY = 1
MAX_PRIORITY = 255

# Older task files name the category field "project".
_LEGACY_KEYS = {"project": "category"}


def validate_text(name: str, value: str) -> str:
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be a string")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable argv bytes arrive as lone surrogates.
        raise InvalidInput(f"{name} is not valid UTF-8 text: {value!r}") from None
    return value


def validate_title(title: str) -> str:
    validate_text("title", title)
    if not title.strip():
        raise InvalidInput("title must be a non-empty string")
    return title


def validate_priority(priority: int) -> int:
    # bool is an int subclass; True is not a priority.
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidInput(f"priority must be an integer, got {priority!r}")
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise InvalidInput(
            f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {priority}"
        )
    return priority


def parse_priority(raw: str | int) -> int:
    """Parse a command-line priority ("3", " 3 ") into a validated int."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return validate_priority(raw)
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise InvalidInput(
            f"Invalid priority {raw!r}: expected a whole number "
            f"between {MIN_PRIORITY} and {MAX_PRIORITY}"
        ) from None
    return validate_priority(value)


@dataclass(slots=True)
class Task:
    title: str
    description: str
    priority: int
    status: str
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "status": self.status,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one stored JSON object.

        Raises ValueError on any shape problem; the store turns that into
        a PersistenceError with the file path attached.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        data = dict(raw)
        for old, new in _LEGACY_KEYS.items():
            if old in data and new not in data:
                data[new] = data.pop(old)

        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                raise ValueError(f"task record is missing field {f.name!r}")
            values[f.name] = data[f.name]

        try:
            for name in ("description", "status", "category"):
                validate_text(name, values[name])
            validate_title(values["title"])
            validate_priority(values["priority"])
        except InvalidInput as exc:
            raise ValueError(str(exc)) from None

        return cls(**values)


@dataclass(slots=True)
class TaskUpdate:
    """
    Partial update: each field left as None keeps the task's current value.
    """

    description: str | None = None
    priority: int | None = None
    status: str | None = None
    category: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def changed_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def validate(self) -> None:
        if self.priority is not None:
            validate_priority(self.priority)
        for name in ("description", "status", "category"):
            value = getattr(self, name)
            if value is not None:
                validate_text(name, value)

    def apply_to(self, task: Task) -> None:
        """Merge supplied fields onto task. Call validate() first."""
        for name, value in self.changed_fields().items():
            setattr(task, name, value)
