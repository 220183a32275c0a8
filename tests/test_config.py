# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpad.config import DEFAULT_API_BASE_URL, Settings


@pytest.fixture()
def clean_env(monkeypatch):
    for name in (
        "TASKPAD_APP_NAME",
        "TASKPAD_LOG_LEVEL",
        "TASKPAD_API_BASE_URL",
        "TASKPAD_HTTP_CONNECT_TIMEOUT_SECONDS",
        "TASKPAD_HTTP_READ_TIMEOUT_SECONDS",
        "TASKPAD_DATA_DIR",
        "TASKPAD_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env(load_env_file=False)
    assert s.app_name == "taskpad"
    assert s.log_level == "INFO"
    assert s.api_base_url == DEFAULT_API_BASE_URL
    assert s.http_connect_timeout == 5.0
    assert s.http_read_timeout == 15.0
    assert s.console_enabled is True
    assert s.data_dir == Path(".local/taskpad")


def test_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKPAD_API_BASE_URL", "https://tasks.example.com/api")
    clean_env.setenv("TASKPAD_HTTP_READ_TIMEOUT_SECONDS", "2.5")
    clean_env.setenv("TASKPAD_CONSOLE_ENABLED", "off")
    clean_env.setenv("TASKPAD_LOG_LEVEL", "debug")
    clean_env.setenv("TASKPAD_DATA_DIR", str(tmp_path))

    s = Settings.from_env(load_env_file=False)
    assert s.api_base_url == "https://tasks.example.com/api/"
    assert s.http_read_timeout == 2.5
    assert s.console_enabled is False
    assert s.log_level == "DEBUG"
    assert s.data_dir == tmp_path


@pytest.mark.parametrize("raw", ["", "abc", "-1", "0"])
def test_bad_timeouts_fall_back(clean_env, raw: str) -> None:
    clean_env.setenv("TASKPAD_HTTP_CONNECT_TIMEOUT_SECONDS", raw)
    assert Settings.from_env(load_env_file=False).http_connect_timeout == 5.0
