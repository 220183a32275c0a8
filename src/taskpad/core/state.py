# src/taskpad/core/state.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from ..tasks.task_models import Task

if TYPE_CHECKING:
    from .view_model import TaskViewModel

logger = logging.getLogger(__name__)

StateObserver = Callable[["UIState"], None]


@dataclass(frozen=True, slots=True)
class UIState:
    """One immutable snapshot of what the task screen shows."""

    tasks: tuple[Task, ...] = ()
    is_loading: bool = False
    error: str | None = None

    def copy(self, **changes: Any) -> UIState:
        if "tasks" in changes:
            changes["tasks"] = tuple(changes["tasks"])
        return replace(self, **changes)


class StateCell:
    """
    Single-writer observable holding the current UIState.

    - update(fn) applies fn to the latest snapshot and swaps the result in atomically
    - observers receive the current snapshot on subscribe, then every replacement
      in order; a snapshot superseded by a reentrant update is not delivered late
    - observer errors are logged and never reach the writer
    """

    def __init__(self, initial: UIState | None = None) -> None:
        self._value = initial if initial is not None else UIState()
        self._observers: list[StateObserver] = []
        # Reentrant: an observer may issue an intent that updates the cell again.
        self._lock = threading.RLock()

    @property
    def value(self) -> UIState:
        return self._value

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register observer; returns a callable that unsubscribes it."""
        with self._lock:
            self._observers.append(observer)
            self._deliver(observer, self._value)

        def _unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return _unsubscribe

    def update(self, fn: Callable[[UIState], UIState]) -> UIState:
        with self._lock:
            new_value = fn(self._value)
            if new_value == self._value:
                return self._value
            self._value = new_value
            for observer in list(self._observers):
                # A reentrant update already published something newer.
                if self._value is not new_value:
                    break
                self._deliver(observer, new_value)
            return new_value

    @staticmethod
    def _deliver(observer: StateObserver, value: UIState) -> None:
        try:
            observer(value)
        except Exception:
            logger.exception("State observer %r failed", observer)


@dataclass
class AppState:
    """What a running console session holds on to."""

    settings: object
    view_model: TaskViewModel
