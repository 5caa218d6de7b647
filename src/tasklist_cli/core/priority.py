"""Urgency tier from due-date proximity."""

from __future__ import annotations

from datetime import date, datetime

from tasklist_cli.models import Priority

from .clock import days_until

MEDIUM_WINDOW_DAYS = 2


def classify(value: str | date | None, now: datetime | None = None) -> Priority:
    """Classify a due date.

    Overdue and due-today are HIGH, the next two days MEDIUM, anything later
    LOW. Tasks without a usable date are LOW; callers normally hide the
    priority of undated or completed tasks anyway.
    """
    days = days_until(value, now)
    if days is None:
        return Priority.LOW
    if days <= 0:
        return Priority.HIGH
    if days <= MEDIUM_WINDOW_DAYS:
        return Priority.MEDIUM
    return Priority.LOW
