# src/taskpad/tasks/validation.py

from __future__ import annotations

from typing import Any

from .task_models import MAX_PRIORITY, MIN_PRIORITY

VALIDATION_MESSAGE = "Invalid input. Check the form fields."


def validate_task_input(title: Any, description: Any, priority: Any) -> bool:
    """
    Local form check run before any network call.

    Title and description must be non-blank; priority must be an int in [1, 10].
    """
    if not isinstance(title, str) or not title.strip():
        return False
    if not isinstance(description, str) or not description.strip():
        return False
    if isinstance(priority, bool) or not isinstance(priority, int):
        return False
    return MIN_PRIORITY <= priority <= MAX_PRIORITY
