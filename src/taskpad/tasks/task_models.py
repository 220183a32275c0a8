# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MIN_PRIORITY = 1
MAX_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class Task:
    """
    A task as the server knows it.

    id is assigned by the server; a candidate built on the client carries id=0
    until the create call returns the persisted copy.
    """

    title: str
    description: str
    priority: int
    id: int = 0

    @property
    def is_persisted(self) -> bool:
        return self.id != 0

    def to_payload(self) -> dict[str, Any]:
        """JSON body for POST/PUT. The id travels in the URL, never in the body."""
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
        }

    @classmethod
    def from_json(cls, data: Any) -> Task:
        """
        Build a Task from a decoded JSON object.

        Raises ValueError if the object does not look like a task.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        raw_id = data.get("id", 0)
        raw_priority = data.get("priority")
        # bool is an int subclass; a JSON true is not a priority.
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"task id must be an integer, got {raw_id!r}")
        if isinstance(raw_priority, bool) or not isinstance(raw_priority, int):
            raise ValueError(f"task priority must be an integer, got {raw_priority!r}")

        title = data.get("title")
        description = data.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            raise ValueError("task title and description must be strings")

        return cls(id=raw_id, title=title, description=description, priority=raw_priority)


def tasks_from_json(data: Any) -> list[Task]:
    """Decode a JSON array of tasks. A null body is an empty list."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array of tasks, got {type(data).__name__}")
    return [Task.from_json(item) for item in data]
