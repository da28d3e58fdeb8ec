# src/taskflow/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    """
    Everything a command handler may touch.

    The registry is injected rather than global so tests can build a fresh
    state per case. Access is strictly sequential (one command at a time).
    """

    # Settings (or a SimpleNamespace with the same attributes in tests).
    settings: object
    registry: TaskRegistry = field(default_factory=TaskRegistry)

    @property
    def color(self) -> bool:
        return bool(getattr(self.settings, "color", False))
