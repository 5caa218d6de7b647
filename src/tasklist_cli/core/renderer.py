"""Build the render model for the presentation layer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from tasklist_cli.models import RenderModel, Task, TaskRow

from .clock import format_for_display, is_overdue
from .labels import DEFAULT_LANGUAGE, label
from .priority import classify
from .query import count_tasks


def render_row(
    task: Task, now: datetime | None = None, language: str = DEFAULT_LANGUAGE
) -> TaskRow:
    """Display record for one task."""
    if task.date:
        date_label = format_for_display(task.date, now, language)
    else:
        date_label = label("no_date", language)

    priority = None
    priority_label = None
    overdue = False
    if task.date and not task.done:
        priority = classify(task.date, now)
        overdue = is_overdue(task.date, now)
        if overdue:
            priority_label = label("overdue", language)
        else:
            priority_label = label(f"priority.{priority.value}", language)

    return TaskRow(
        id=task.id,
        title=task.text,
        date_label=date_label,
        priority=priority,
        priority_label=priority_label,
        is_overdue=overdue,
        done=task.done,
    )


def render_model(
    visible: Sequence[Task],
    collection: Iterable[Task],
    now: datetime | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> RenderModel:
    """Render the visible tasks.

    Counters cover the whole collection, not just the visible rows. The
    function has no side effects; calling it again with the same inputs
    yields an equal model.
    """
    rows = [render_row(task, now, language) for task in visible]
    return RenderModel(rows=rows, counts=count_tasks(collection), is_empty=not rows)
