# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The view model depends on Protocols instead of concrete implementations.
This keeps the HTTP backend swappable and makes testing easier.
"""

from typing import Protocol

import httpx

from ..tasks.task_models import Task
from .outcome import Outcome


class TaskApi(Protocol):
    """Transport-level task API: request in, raw response out."""

    async def list_tasks(self) -> httpx.Response: ...
    async def get_task(self, task_id: int) -> httpx.Response: ...
    async def create_task(self, task: Task) -> httpx.Response: ...
    async def update_task(self, task: Task) -> httpx.Response: ...
    async def delete_task(self, task_id: int) -> httpx.Response: ...
    async def aclose(self) -> None: ...


class TaskRepo(Protocol):
    """
    Outcome-normalizing repository. Implementations must never raise;
    every failure comes back as a Failure value.
    """

    async def fetch_all(self) -> Outcome[list[Task]]: ...
    async def get(self, task_id: int) -> Outcome[Task]: ...
    async def create(self, candidate: Task) -> Outcome[Task]: ...
    async def update(self, task: Task) -> Outcome[Task]: ...
    async def delete(self, task_id: int) -> Outcome[None]: ...
    async def aclose(self) -> None: ...
