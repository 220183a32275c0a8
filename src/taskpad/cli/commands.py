# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..connectors.render import render_state

# (state, whitespace-split args, raw argument text as typed)
CommandHandler = Callable[[AppState, list[str], str], str | None]

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None if the line is not a command
        or the command has nothing to say beyond the re-rendered list.
        """
        if not line.startswith("/"):
            return None

        head, _, text = line[1:].lstrip().partition(" ")
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        args = text.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_fields(text: str) -> list[str]:
    return [part.strip() for part in text.split(FIELD_SEPARATOR)]


def _parse_int(raw: str) -> int | str:
    """int if it parses, else the raw text (left for validation to reject)."""
    try:
        return int(raw.strip())
    except ValueError:
        return raw


def cmd_help(state: AppState, args: list[str], text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], text: str) -> str:
    return render_state(state.view_model.state)


def cmd_refresh(state: AppState, args: list[str], text: str) -> str | None:
    state.view_model.refresh()
    return None


def cmd_add(state: AppState, args: list[str], text: str) -> str | None:
    """
    /add title | description | priority
    """
    fields = _split_fields(text)
    if len(fields) != 3:
        return "Usage: /add title | description | priority (1-10)"

    title, description, raw_priority = fields
    state.view_model.add(title, description, _parse_int(raw_priority))
    return None


def cmd_edit(state: AppState, args: list[str], text: str) -> str | None:
    """
    /edit id | title | description | priority
    """
    fields = _split_fields(text)
    if len(fields) != 4:
        return "Usage: /edit id | title | description | priority (1-10)"

    raw_id, title, description, raw_priority = fields
    task_id = _parse_int(raw_id)
    if not isinstance(task_id, int):
        return f"Not a task id: {raw_id!r}"

    state.view_model.update(task_id, title, description, _parse_int(raw_priority))
    return None


def cmd_delete(state: AppState, args: list[str], text: str) -> str | None:
    """
    /delete id
    """
    if len(args) != 1:
        return "Usage: /delete id"

    task_id = _parse_int(args[0])
    if not isinstance(task_id, int):
        return f"Not a task id: {args[0]!r}"

    state.view_model.delete(task_id)
    return None


def cmd_show(state: AppState, args: list[str], text: str) -> str | None:
    """
    /show id
    """
    if len(args) != 1:
        return "Usage: /show id"

    task_id = _parse_int(args[0])
    if not isinstance(task_id, int):
        return f"Not a task id: {args[0]!r}"

    state.view_model.reload(task_id)
    return None


def cmd_dismiss(state: AppState, args: list[str], text: str) -> str | None:
    state.view_model.clear_error()
    return None


def cmd_status(state: AppState, args: list[str], text: str) -> str:
    vm = state.view_model
    ui = vm.state
    base_url = getattr(state.settings, "api_base_url", "?")
    failure = vm.last_failure
    last_error = f"{failure.kind.value}: {failure.reason}" if failure is not None else "none"
    return (
        "Status:\n"
        f"  Backend: {base_url}\n"
        f"  Tasks loaded: {len(ui.tasks)}\n"
        f"  Requests in flight: {'yes' if vm.busy else 'no'}\n"
        f"  Last error: {last_error}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the server.", aliases=["r"])
registry.register("add", cmd_add, help_text="Create a task: /add title | description | priority.")
registry.register("edit", cmd_edit, help_text="Change a task: /edit id | title | description | priority.")
registry.register("show", cmd_show, help_text="Re-read one task from the server: /show id.")
registry.register("delete",cmd_delete, help_text="Delete a task: /delete id.", aliases=["rm"])
registry.register("dismiss", cmd_dismiss, help_text="Clear the error message.")
registry.register("status", cmd_status, help_text="Show backend URL and request state.")
