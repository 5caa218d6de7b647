"""Pure task derivations: date classification, priority, querying, rendering."""

from .clock import (
    days_until,
    format_for_display,
    is_overdue,
    is_today,
    is_tomorrow,
    parse_date,
)
from .priority import classify
from .query import count_tasks, visible_tasks
from .renderer import render_model, render_row

__all__ = [
    "classify",
    "count_tasks",
    "days_until",
    "format_for_display",
    "is_overdue",
    "is_today",
    "is_tomorrow",
    "parse_date",
    "render_model",
    "render_row",
    "visible_tasks",
]
