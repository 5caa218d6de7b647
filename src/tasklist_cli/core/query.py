"""Derive the visible, ordered subset of tasks."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from tasklist_cli.models import FilterMode, Task, TaskCounts

from .clock import is_today, sort_key_date


def matches_filter(
    task: Task, filter_mode: FilterMode, now: datetime | None = None
) -> bool:
    """Whether a task belongs to the given filter mode."""
    if filter_mode == FilterMode.PENDING:
        return not task.done
    if filter_mode == FilterMode.COMPLETED:
        return task.done
    if filter_mode == FilterMode.TODAY:
        return is_today(task.date, now)
    return True


def matches_search(task: Task, term: str) -> bool:
    """Case-insensitive substring match on the task text."""
    return term.casefold() in (task.text or "").casefold()


def sort_key(task: Task) -> tuple:
    """Incomplete first, then earliest due date (undated last), newest first."""
    return (task.done, sort_key_date(task.date), -task.created_at.timestamp())


def visible_tasks(
    tasks: Iterable[Task],
    filter_mode: FilterMode = FilterMode.ALL,
    search_term: str = "",
    now: datetime | None = None,
) -> list[Task]:
    """Return the tasks to display, in display order.

    A non-empty search term replaces the filter mode entirely: only the text
    match decides inclusion. The input is never modified.
    """
    term = (search_term or "").strip()
    mode = FilterMode(filter_mode)
    if term:
        selected = [t for t in tasks if matches_search(t, term)]
    else:
        selected = [t for t in tasks if matches_filter(t, mode, now)]
    return sorted(selected, key=sort_key)


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    """Total, pending and completed counts over a collection."""
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if task.done:
            completed += 1
    return TaskCounts(total=total, pending=total - completed, completed=completed)
