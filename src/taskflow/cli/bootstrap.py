# src/taskflow/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it loads settings once and wires a
fresh in-memory TaskRegistry into AppState. Nothing is loaded from disk.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, registry: TaskRegistry | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and registry injectable makes the app easier to test and
    avoids hidden global reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if registry is None:
        registry = TaskRegistry()

    logger.debug("State created (color=%s)", getattr(settings, "color", False))
    return AppState(settings=settings, registry=registry)
