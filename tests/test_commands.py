# tests/test_commands.py

from __future__ import annotations

import pytest

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.core.state import AppState
from taskpad.core.view_model import TaskViewModel
from taskpad.tasks.validation import VALIDATION_MESSAGE


async def _state(settings, repo) -> AppState:
    vm = TaskViewModel(repo)
    await vm.wait_idle()
    return AppState(settings=settings, view_model=vm)


def test_command_registry_routes_and_aliases() -> None:
    reg = CommandRegistry()
    called: list[tuple[list[str], str]] = []

    def handler(state, args, text):
        called.append((args, text))
        return "done"

    reg.register("a", handler, "a", aliases=["x"])

    assert reg.handle(None, "/a one two") == "done"  # type: ignore[arg-type]
    assert reg.handle(None, "/X") == "done"  # type: ignore[arg-type]
    assert called == [(["one", "two"], "one two"), ([], "")]


def test_command_registry_unknown_and_non_command() -> None:
    reg = CommandRegistry()
    assert reg.handle(None, "hello") is None  # type: ignore[arg-type]
    assert "Unknown command" in (reg.handle(None, "/nope") or "")  # type: ignore[arg-type]
    assert "Empty command" in (reg.handle(None, "/") or "")  # type: ignore[arg-type]


def test_help_lists_commands() -> None:
    text = registry.build_help()
    for name in ("/add", "/delete", "/edit", "/refresh", "/list", "/dismiss", "/status", "/show"):
        assert name in text


@pytest.mark.asyncio
async def test_add_command_creates_task(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    assert registry.handle(state, "/add Call mom | Sunday evening | 4") is None
    await state.view_model.wait_idle()

    last = state.view_model.state.tasks[-1]
    assert (last.title, last.description, last.priority) == ("Call mom", "Sunday evening", 4)


@pytest.mark.asyncio
async def test_add_command_with_bad_priority_is_a_validation_error(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    registry.handle(state, "/add Call mom | Sunday | soon")

    assert state.view_model.state.error == VALIDATION_MESSAGE
    assert fake_repo.ops() == ["fetch_all"]


@pytest.mark.asyncio
async def test_add_command_usage(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)
    assert "Usage" in (registry.handle(state, "/add only a title") or "")


@pytest.mark.asyncio
async def test_edit_and_delete_commands(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    registry.handle(state, "/edit 2 | Write report | Q4 numbers | 9")
    await state.view_model.wait_idle()
    assert state.view_model.state.tasks[1].description == "Q4 numbers"

    registry.handle(state, "/rm 1")
    await state.view_model.wait_idle()
    assert [t.id for t in state.view_model.state.tasks] == [2]


@pytest.mark.asyncio
async def test_delete_command_rejects_non_numeric_id(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    assert "Not a task id" in (registry.handle(state, "/delete abc") or "")
    assert "Usage" in (registry.handle(state, "/delete") or "")
    assert "Not a task id" in (registry.handle(state, "/edit x | a | b | 1") or "")
    assert "delete" not in fake_repo.ops()


@pytest.mark.asyncio
async def test_status_and_dismiss(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)
    registry.handle(state, "/add | | 0")

    status = registry.handle(state, "/status") or ""
    assert "http://tasks.test/api/" in status
    assert "Tasks loaded: 2" in status
    assert "validation" in status

    registry.handle(state, "/dismiss")
    assert state.view_model.state.error is None


@pytest.mark.asyncio
async def test_add_command_keeps_inner_spacing_of_fields(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    registry.handle(state, "/add Buy  milk |  two   liters  | 3")
    await state.view_model.wait_idle()

    last = state.view_model.state.tasks[-1]
    assert (last.title, last.description) == ("Buy  milk", "two   liters")


@pytest.mark.asyncio
async def test_show_command_rereads_one_task(settings, fake_repo) -> None:
    state = await _state(settings, fake_repo)

    assert registry.handle(state, "/show 2") is None
    await state.view_model.wait_idle()
    assert fake_repo.ops()[-1] == "get"

    assert "Usage" in (registry.handle(state, "/show") or "")
    assert "Not a task id" in (registry.handle(state, "/show two") or "")
    assert fake_repo.ops().count("get") == 1
