# src/taskpad/core/view_model.py

from __future__ import annotations

"""
Task screen view model.

The single authority over UIState. Intents (fetch/reload/add/update/delete) run as
asyncio tasks on the caller's event loop:

- the Loading transition is published synchronously, before the intent returns
- the repository call is awaited without blocking the loop
- the settle step is one atomic update computed from the *latest* snapshot,
  so intents that complete in any order never lose each other's changes

Intents are not queued: a fetch and an add may be in flight at the same time.
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from ..tasks.task_models import Task
from ..tasks.task_repository import describe_exception
from ..tasks.validation import VALIDATION_MESSAGE, validate_task_input
from .outcome import ErrorKind, Failure, Success
from .ports import TaskRepo
from .state import StateCell, StateObserver, UIState

logger = logging.getLogger(__name__)


def _put(tasks: tuple[Task, ...], fresh: Task) -> list[Task]:
    if any(t.id == fresh.id for t in tasks):
        return [fresh if t.id == fresh.id else t for t in tasks]
    return [*tasks, fresh]


class TaskViewModel:
    def __init__(self, repository: TaskRepo, *, auto_fetch: bool = True) -> None:
        """
        Must be constructed on a running event loop when auto_fetch is True:
        the initial fetch is launched right away.
        """
        self._repository = repository
        self._cell = StateCell(UIState())
        self._inflight: set[asyncio.Task[None]] = set()
        self._last_failure: Failure | None = None

        if auto_fetch:
            self.fetch()

    # ---- observation ----

    @property
    def state(self) -> UIState:
        return self._cell.value

    @property
    def last_failure(self) -> Failure | None:
        """The most recent failure with its category, or None after a success."""
        return self._last_failure

    @property
    def busy(self) -> bool:
        return bool(self._inflight)

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        return self._cell.subscribe(observer)

    # ---- intents ----

    def fetch(self) -> asyncio.Task[None]:
        logger.debug("Intent fetch")
        return self._launch("fetch", self._fetch)

    def refresh(self) -> asyncio.Task[None]:
        return self.fetch()

    def add(self, title: Any, description: Any, priority: Any) -> asyncio.Task[None] | None:
        """Returns None when the input is rejected locally (no network call)."""
        logger.debug("Intent add title=%r priority=%r", title, priority)
        if not validate_task_input(title, description, priority):
            self._reject_input()
            return None

        candidate = Task(title=title, description=description, priority=priority)
        return self._launch("add", lambda: self._add(candidate))

    def update(self, task_id: int, title: Any, description: Any, priority: Any) -> asyncio.Task[None] | None:
        logger.debug("Intent update id=%s title=%r priority=%r", task_id, title, priority)
        if not validate_task_input(title, description, priority):
            self._reject_input()
            return None

        changed = Task(id=int(task_id), title=title, description=description, priority=priority)
        return self._launch("update", lambda: self._update(changed))

    def delete(self, task_id: int) -> asyncio.Task[None]:
        logger.debug("Intent delete id=%s", task_id)
        task_id = int(task_id)
        return self._launch("delete", lambda: self._delete(task_id))

    def reload(self, task_id: int) -> asyncio.Task[None]:
        """Re-read one task from the server and put it in place (appended if not listed yet)."""
        logger.debug("Intent reload id=%s", task_id)
        task_id = int(task_id)
        return self._launch("reload", lambda: self._reload(task_id))

    def clear_error(self) -> None:
        self._last_failure = None
        self._cell.update(lambda s: s.copy(error=None))

    async def wait_idle(self) -> None:
        """Wait until every intent issued so far (and any they spawned) has settled."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def aclose(self) -> None:
        await self.wait_idle()
        await self._repository.aclose()

    # ---- intent bodies ----

    async def _fetch(self) -> None:
        outcome = await self._repository.fetch_all()
        if isinstance(outcome, Success):
            tasks = outcome.value
            self._settle_success(lambda s: s.copy(tasks=tasks, is_loading=False, error=None))
        else:
            self._settle_failure(outcome)

    async def _add(self, candidate: Task) -> None:
        outcome = await self._repository.create(candidate)
        if isinstance(outcome, Success):
            created = outcome.value
            logger.info("Task created id=%s", created.id)
            self._settle_success(lambda s: s.copy(tasks=(*s.tasks, created), is_loading=False, error=None))
        else:
            self._settle_failure(outcome)

    async def _update(self, changed: Task) -> None:
        outcome = await self._repository.update(changed)
        if isinstance(outcome, Success):
            saved = outcome.value
            logger.info("Task updated id=%s", saved.id)
            self._settle_success(
                lambda s: s.copy(
                    tasks=[saved if t.id == changed.id else t for t in s.tasks],
                    is_loading=False,
                    error=None,
                )
            )
        else:
            self._settle_failure(outcome)

    async def _reload(self, task_id: int) -> None:
        outcome = await self._repository.get(task_id)
        if isinstance(outcome, Success):
            fresh = outcome.value
            logger.info("Task reloaded id=%s", fresh.id)
            self._settle_success(lambda s: s.copy(tasks=_put(s.tasks, fresh), is_loading=False, error=None))
        else:
            self._settle_failure(outcome)

    async def _delete(self, task_id: int) -> None:
        outcome = await self._repository.delete(task_id)
        if isinstance(outcome, Success):
            logger.info("Task deleted id=%s", task_id)
            self._settle_success(
                lambda s: s.copy(tasks=[t for t in s.tasks if t.id != task_id], is_loading=False, error=None)
            )
        else:
            self._settle_failure(outcome)

    # ---- transitions ----

    def _start_loading(self) -> None:
        self._cell.update(lambda s: s.copy(is_loading=True, error=None))

    def _reject_input(self) -> None:
        # Pure local rejection: is_loading is left as it is.
        self._last_failure = Failure(VALIDATION_MESSAGE, kind=ErrorKind.VALIDATION)
        self._cell.update(lambda s: s.copy(error=VALIDATION_MESSAGE))

    def _settle_success(self, change: Callable[[UIState], UIState]) -> None:
        self._last_failure = None
        self._cell.update(change)

    def _settle_failure(self, failure: Failure) -> None:
        self._last_failure = failure
        self._cell.update(lambda s: s.copy(is_loading=False, error=failure.reason))

    def _launch(self, name: str, body: Callable[[], Coroutine[Any, Any, None]]) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()
        self._start_loading()
        task = loop.create_task(self._guard(name, body), name=f"taskpad-{name}")
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _guard(self, name: str, body: Callable[[], Coroutine[Any, Any, None]]) -> None:
        try:
            await body()
        except Exception as e:
            # Repositories report failures by value; reaching here is a bug, but the session survives it.
            logger.exception("Intent %s crashed", name)
            self._settle_failure(Failure(describe_exception(e), kind=ErrorKind.TRANSPORT))
