# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.tasks.task_models import Task

from .fakes import FakeTaskRepository, InMemoryTaskServer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the API client.

    We intentionally use a SimpleNamespace rather than reading the real environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        console_enabled=True,
        api_base_url="http://tasks.test/api/",
        http_connect_timeout=1.0,
        http_read_timeout=1.0,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def seed_tasks() -> list[Task]:
    return [
        Task(id=1, title="Buy milk", description="2 liters", priority=3),
        Task(id=2, title="Write report", description="Q3 numbers", priority=8),
    ]


@pytest.fixture()
def fake_repo(seed_tasks: list[Task]) -> FakeTaskRepository:
    return FakeTaskRepository(seed_tasks)


@pytest.fixture()
def server(seed_tasks: list[Task]) -> InMemoryTaskServer:
    return InMemoryTaskServer(seed_tasks)
