# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskflow.core.state import AppState
from taskflow.tasks.task_registry import TaskRegistry


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment. Color is off so output
    can be compared as plain text.
    """
    return SimpleNamespace(
        app_name="TaskFlow",
        log_level="WARNING",
        log_dir=None,
        color=False,
        prompt="taskflow> ",
        show_banner=False,
    )


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def state(settings: SimpleNamespace, registry: TaskRegistry) -> AppState:
    return AppState(settings=settings, registry=registry)
