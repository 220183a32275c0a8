# tests/test_state_cell.py

from __future__ import annotations

import logging

from taskpad.core.state import StateCell, UIState
from taskpad.tasks.task_models import Task


def test_subscribe_delivers_current_then_updates() -> None:
    cell = StateCell()
    seen: list[UIState] = []

    unsubscribe = cell.subscribe(seen.append)
    cell.update(lambda s: s.copy(is_loading=True))
    cell.update(lambda s: s.copy(is_loading=False, error="boom"))
    unsubscribe()
    cell.update(lambda s: s.copy(error=None))

    assert seen == [
        UIState(),
        UIState(is_loading=True),
        UIState(is_loading=False, error="boom"),
    ]
    assert cell.value == UIState()


def test_update_reads_latest_value() -> None:
    cell = StateCell()
    task_a = Task(id=1, title="a", description="a", priority=1)
    task_b = Task(id=2, title="b", description="b", priority=2)

    cell.update(lambda s: s.copy(tasks=(*s.tasks, task_a)))
    cell.update(lambda s: s.copy(tasks=(*s.tasks, task_b)))

    assert cell.value.tasks == (task_a, task_b)


def test_copy_freezes_task_lists() -> None:
    state = UIState().copy(tasks=[Task(id=1, title="a", description="a", priority=1)])
    assert isinstance(state.tasks, tuple)


def test_equal_snapshot_is_not_republished() -> None:
    cell = StateCell()
    seen: list[UIState] = []
    cell.subscribe(seen.append)

    cell.update(lambda _s: UIState())
    assert seen == [UIState()]


def test_observer_failure_does_not_reach_writer(caplog) -> None:
    cell = StateCell()
    seen: list[UIState] = []

    def broken(_state: UIState) -> None:
        raise RuntimeError("observer bug")

    cell.subscribe(broken)
    cell.subscribe(seen.append)

    with caplog.at_level(logging.ERROR, logger="taskpad.core.state"):
        cell.update(lambda s: s.copy(error="x"))

    assert cell.value.error == "x"
    assert seen[-1].error == "x"
    assert "observer" in caplog.text


def test_observer_may_update_reentrantly() -> None:
    cell = StateCell()
    seen: list[UIState] = []

    def clear_errors(state: UIState) -> None:
        if state.error:
            cell.update(lambda s: s.copy(error=None))

    cell.subscribe(clear_errors)
    cell.subscribe(seen.append)
    cell.update(lambda s: s.copy(error="transient"))

    assert cell.value.error is None
    assert seen[-1].error is None
