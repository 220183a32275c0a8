# src/taskpad/api/client.py

"""
Thin async HTTP client for the task backend.

Endpoints (relative to settings.api_base_url):
- GET    tasks        -> JSON array of tasks
- GET    tasks/{id}   -> JSON task
- POST   tasks        -> created JSON task (server-assigned id)
- PUT    tasks/{id}   -> updated JSON task
- DELETE tasks/{id}   -> empty body

Methods return the raw httpx.Response. Interpreting status codes and bodies is
the repository's job; transport exceptions (httpx.HTTPError) propagate.
"""

from __future__ import annotations

import logging

import httpx

from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


class TaskApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=_make_timeout(connect_timeout, read_timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )
        logger.info("TaskApiClient ready base_url=%s", base_url)

    @classmethod
    def from_settings(cls, settings, *, transport: httpx.AsyncBaseTransport | None = None) -> TaskApiClient:
        return cls(
            str(getattr(settings, "api_base_url")),
            connect_timeout=float(getattr(settings, "http_connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "http_read_timeout", 15.0)),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_tasks(self) -> httpx.Response:
        return await self._client.get("tasks")

    async def get_task(self, task_id: int) -> httpx.Response:
        return await self._client.get(f"tasks/{int(task_id)}")

    async def create_task(self, task: Task) -> httpx.Response:
        return await self._client.post("tasks", json=task.to_payload())

    async def update_task(self, task: Task) -> httpx.Response:
        return await self._client.put(f"tasks/{int(task.id)}", json=task.to_payload())

    async def delete_task(self, task_id: int) -> httpx.Response:
        return await self._client.delete(f"tasks/{int(task_id)}")
