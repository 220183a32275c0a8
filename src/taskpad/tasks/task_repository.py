# src/taskpad/tasks/task_repository.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx

from ..core.outcome import ErrorKind, Failure, Outcome, Success
from ..core.ports import TaskApi
from .task_models import Task, tasks_from_json

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_BODY = object()


def describe_http_error(response: httpx.Response) -> str:
    reason = (response.reason_phrase or "").strip()
    return f"Error: {response.status_code} - {reason}" if reason else f"Error: {response.status_code}"


def describe_exception(exc: BaseException) -> str:
    return str(exc).strip() or exc.__class__.__name__


def _json_body(response: httpx.Response) -> Any:
    """Decoded JSON body, or _NO_BODY if the response carries nothing."""
    if not response.content or not response.content.strip():
        return _NO_BODY
    return response.json()


def _decode_task_list(response: httpx.Response) -> list[Task]:
    body = _json_body(response)
    return [] if body is _NO_BODY else tasks_from_json(body)


def _decode_task(response: httpx.Response) -> Task:
    body = _json_body(response)
    if body is _NO_BODY or body is None:
        raise ValueError("response body is empty")
    return Task.from_json(body)


def _decode_nothing(response: httpx.Response) -> None:
    return None


class TaskRepository:
    """
    Adapts TaskApi responses into Outcome values.

    - 2xx with a decodable body  -> Success
    - non-2xx                    -> Failure(kind=server, "Error: <code> - <reason>")
    - network error / timeout    -> Failure(kind=transport, exception message)
    - 2xx with a missing or malformed body where one is required
                                 -> Failure(kind=transport, "Invalid response from server: ...")

    Nothing raises past this class. Calls are awaited on the event loop, so the
    console keeps rendering while a request is in flight.
    """

    def __init__(self, api: TaskApi) -> None:
        self._api = api

    async def aclose(self) -> None:
        await self._api.aclose()

    async def fetch_all(self) -> Outcome[list[Task]]:
        return await self._call("fetch_all", self._api.list_tasks, _decode_task_list)

    async def get(self, task_id: int) -> Outcome[Task]:
        return await self._call(f"get id={task_id}", lambda: self._api.get_task(task_id), _decode_task)

    async def create(self, candidate: Task) -> Outcome[Task]:
        outcome = await self._call("create", lambda: self._api.create_task(candidate), _decode_task)
        if isinstance(outcome, Success) and not outcome.value.is_persisted:
            logger.info("create returned a task without a server id: %r", outcome.value)
            return Failure(
                "Invalid response from server: created task has no id",
                kind=ErrorKind.TRANSPORT,
            )
        return outcome

    async def update(self, task: Task) -> Outcome[Task]:
        return await self._call(f"update id={task.id}", lambda: self._api.update_task(task), _decode_task)

    async def delete(self, task_id: int) -> Outcome[None]:
        return await self._call(f"delete id={task_id}", lambda: self._api.delete_task(task_id), _decode_nothing)

    async def _call(
        self,
        op: str,
        request: Callable[[], Awaitable[httpx.Response]],
        decode: Callable[[httpx.Response], T],
    ) -> Outcome[T]:
        try:
            response = await request()
        except httpx.HTTPError as e:
            logger.info("Task API %s: transport error (%s): %s", op, e.__class__.__name__, e)
            return Failure(describe_exception(e), kind=ErrorKind.TRANSPORT)
        except Exception as e:
            # e.g. RuntimeError from a client that was already closed.
            logger.exception("Task API %s: request failed", op)
            return Failure(describe_exception(e), kind=ErrorKind.TRANSPORT)

        if not response.is_success:
            logger.info("Task API %s: server rejected with status=%s", op, response.status_code)
            return Failure(
                describe_http_error(response),
                kind=ErrorKind.SERVER,
                status_code=response.status_code,
            )

        try:
            value = decode(response)
        except (ValueError, RecursionError) as e:
            logger.info("Task API %s: undecodable body: %s", op, e)
            return Failure(f"Invalid response from server: {describe_exception(e)}", kind=ErrorKind.TRANSPORT)

        logger.debug("Task API %s: ok status=%s", op, response.status_code)
        return Success(value)
