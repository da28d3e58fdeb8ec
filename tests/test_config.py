# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskflow.config import Settings

_VARS = (
    "TASKFLOW_APP_NAME",
    "TASKFLOW_LOG_LEVEL",
    "TASKFLOW_LOG_DIR",
    "TASKFLOW_COLOR",
    "TASKFLOW_PROMPT",
    "TASKFLOW_SHOW_BANNER",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_need_no_environment() -> None:
    s = Settings.from_env()
    assert s.app_name == "TaskFlow"
    assert s.log_level == "WARNING"
    assert s.log_dir is None
    assert s.prompt == "taskflow> "
    assert s.show_banner is True


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKFLOW_APP_NAME", "Todo")
    monkeypatch.setenv("TASKFLOW_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKFLOW_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TASKFLOW_COLOR", "yes")
    monkeypatch.setenv("TASKFLOW_PROMPT", "> ")
    monkeypatch.setenv("TASKFLOW_SHOW_BANNER", "off")

    s = Settings.from_env()
    assert s.app_name == "Todo"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.color is True
    assert s.prompt == "> "
    assert s.show_banner is False


def test_bad_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKFLOW_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "WARNING"


def test_no_color_disables_default_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color is False

    monkeypatch.setenv("TASKFLOW_COLOR", "1")
    assert Settings.from_env().color is True
