# src/taskpad/connectors/render.py

from __future__ import annotations

from ..core.state import UIState
from ..tasks.task_models import Task


def render_task(task: Task) -> str:
    return f"#{task.id} [P{task.priority}] {task.title} - {task.description}"


def render_state(ui: UIState) -> str:
    """Plain-text rendering of one snapshot, the console's version of the task screen."""
    lines: list[str] = []
    if ui.is_loading:
        lines.append("Loading...")
    if ui.error:
        lines.append(f"[ERROR] {ui.error}")

    if ui.tasks:
        lines.append(f"Tasks ({len(ui.tasks)}):")
        lines.extend(f"  {render_task(t)}" for t in ui.tasks)
    elif not ui.is_loading:
        lines.append("No tasks.")

    return "\n".join(lines)
