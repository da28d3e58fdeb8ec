# src/taskflow/tasks/task_registry.py

from __future__ import annotations

import logging

from .task_models import Priority, StatusFilter, Task, TaskResult, TaskStats, TaskStatus

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory task registry for one process run.

    - ids start at 1 and are never reused, even after delete
    - tasks are kept in creation order
    - lookups/mutations by id report TaskResult.NOT_FOUND instead of raising
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        tid = self._next_id
        self._next_id += 1
        return tid

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- operations ----

    def add_task(self, title: str, priority: Priority = Priority.MEDIUM) -> int:
        title = title.strip()
        if not title:
            raise ValueError("task title must not be empty")

        task = Task(id=self._allocate_id(), title=title, priority=priority)
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s", task.id, task.priority)
        return task.id

    def get_task(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def list_tasks(self, status_filter: StatusFilter = StatusFilter.ACTIVE) -> list[Task] | None:
        """
        Return matching tasks in creation order.

        Returns None when the registry holds no tasks at all, so callers can
        tell "nothing here yet" apart from "nothing matches the filter".
        """
        if not self._tasks:
            return None
        return [t for t in self._tasks if status_filter.matches(t)]

    def complete_task(self, task_id: int) -> TaskResult:
        task = self._find(task_id)
        if task is None:
            logger.debug("Complete: task id=%s not found", task_id)
            return TaskResult.NOT_FOUND

        # Completing twice is not an error.
        task.status = TaskStatus.COMPLETED
        logger.debug("Task completed id=%s", task_id)
        return TaskResult.OK

    def delete_task(self, task_id: int) -> TaskResult:
        task = self._find(task_id)
        if task is None:
            logger.debug("Delete: task id=%s not found", task_id)
            return TaskResult.NOT_FOUND

        self._tasks.remove(task)
        logger.debug("Task deleted id=%s remaining=%d", task_id, len(self._tasks))
        return TaskResult.OK

    def set_priority(self, task_id: int, priority: Priority) -> TaskResult:
        task = self._find(task_id)
        if task is None:
            return TaskResult.NOT_FOUND
        task.priority = priority
        logger.debug("Task priority changed id=%s priority=%s", task_id, priority)
        return TaskResult.OK

    def add_tag(self, task_id: int, tag: str) -> TaskResult:
        task = self._find(task_id)
        if task is None:
            return TaskResult.NOT_FOUND
        tag = tag.strip()
        if tag:
            task.tags.append(tag)
        return TaskResult.OK

    def compute_stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.status == TaskStatus.COMPLETED)
        active = total - completed
        rate = round(completed * 100.0 / total, 1) if total else None
        return TaskStats(total=total, completed=completed, active=active, completion_rate=rate)
