# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP client, repository and view model into AppState.
"""

from __future__ import annotations

import logging

import httpx

from ..api.client import TaskApiClient
from ..config import get_settings
from ..core.state import AppState
from ..core.view_model import TaskViewModel
from ..tasks.task_repository import TaskRepository

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_session(
    *,
    settings=None,
    transport: httpx.AsyncBaseTransport | None = None,
    auto_fetch: bool = True,
) -> AppState:
    """
    Build a session: API client -> repository -> view model.

    Must run on the event loop: the view model starts its initial fetch on construction.
    Settings and transport are injectable so tests never touch the real environment/network.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    api = TaskApiClient.from_settings(settings, transport=transport)
    repository = TaskRepository(api)
    view_model = TaskViewModel(repository, auto_fetch=auto_fetch)

    logger.debug("Session created base_url=%s", getattr(settings, "api_base_url", "?"))
    return AppState(settings=settings, view_model=view_model)
