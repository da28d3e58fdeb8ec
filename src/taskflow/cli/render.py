# src/taskflow/cli/render.py

"""
Text rendering for console output.

Color is cosmetic: every function takes `color` and returns the same text
without escape codes when it is False.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Priority, Task, TaskStats

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
BOLD = "\033[1m"

# Priority -> (label, color)
PRIORITY_STYLE: dict[Priority, tuple[str, str]] = {
    Priority.LOW: ("Low", GREEN),
    Priority.MEDIUM: ("Medium", YELLOW),
    Priority.HIGH: ("High", MAGENTA),
    Priority.CRITICAL: ("Critical", RED),
}

MARK_DONE = "✓"
MARK_OPEN = "○"
MARK_FAIL = "✗"


def paint(text: str, *styles: str, color: bool = True) -> str:
    """Apply ANSI styles to text (no-op when color is off or no styles given)."""
    if not color or not styles:
        return text
    return "".join(styles) + text + RESET


def format_task(task: Task, *, color: bool = True) -> str:
    label, pcolor = PRIORITY_STYLE[task.priority]
    mark = MARK_DONE if task.is_completed else MARK_OPEN

    line = (
        paint(f"[{task.id}] {mark} ", pcolor, color=color)
        + paint(task.title, BOLD, color=color)
        + paint(f" ({label})", pcolor, color=color)
    )
    if not task.tags:
        return line

    tags = " ".join(paint(f"#{tag}", CYAN, color=color) for tag in task.tags)
    return f"{line}\n    Tags: {tags}"


def format_task_list(tasks: Iterable[Task], *, color: bool = True) -> str:
    lines = [paint("=== Task List ===", BOLD, color=color)]
    body = [format_task(t, color=color) for t in tasks]
    lines.extend(body or ["No active tasks."])
    return "\n".join(lines)


def format_stats(stats: TaskStats, *, color: bool = True) -> str:
    lines = [
        paint("=== Statistics ===", BOLD, color=color),
        f"Total tasks: {stats.total}",
        paint(f"Completed: {stats.completed}", GREEN, color=color),
        paint(f"Active: {stats.active}", YELLOW, color=color),
    ]
    if stats.completion_rate is not None:
        lines.append(f"Completion rate: {stats.completion_rate:.1f}%")
    return "\n".join(lines)


def format_help(entries: Iterable[tuple[str, str]], *, title: str, color: bool = True) -> str:
    """Render (usage, description) pairs as an aligned command reference."""
    entries = list(entries)
    width = max((len(usage) for usage, _ in entries), default=0)
    lines = [paint(f"{title} - Console Task Manager", BOLD, color=color), "", "Commands:"]
    for usage, description in entries:
        lines.append(f"  {usage.ljust(width)}  - {description}")
    return "\n".join(lines)


def format_banner(app_name: str, *, color: bool = True) -> str:
    return paint(f"Welcome to {app_name}!", BOLD, CYAN, color=color)


def format_prompt(prompt: str, *, color: bool = True) -> str:
    return paint(prompt, BLUE, color=color)
