# src/taskflow/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Priority(StrEnum):
    """Task priority, ordered LOW < MEDIUM < HIGH < CRITICAL."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_ORDER.index(self)

    # Order by rank, not by the string value.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


_PRIORITY_ORDER = (Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.CRITICAL)


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    ACTIVE -> COMPLETED is the only transition exposed by the command set.
    """

    ACTIVE = "active"
    COMPLETED = "completed"


class StatusFilter(StrEnum):
    """Selection used by TaskRegistry.list_tasks (ALL means no filtering)."""

    ACTIVE = "active"
    ALL = "all"

    def matches(self, task: Task) -> bool:
        if self is StatusFilter.ALL:
            return True
        return task.status == TaskStatus.ACTIVE


class TaskResult(StrEnum):
    OK = "ok"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.ACTIVE
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    active: int
    # None when there are no tasks (rate is undefined, not 0%).
    completion_rate: float | None
