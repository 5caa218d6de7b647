"""Calendar helpers that classify a due date relative to "now".

Every function takes an optional ``now``; when omitted the current local
time is used. Aware datetimes are converted to local time first, so all
comparisons happen on the local calendar.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta

from .labels import DEFAULT_LANGUAGE, MONTH_NAMES, WEEKDAY_NAMES, label

_SECONDS_PER_DAY = 24 * 60 * 60


def _resolve_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def parse_date(value: str | date | None) -> date | None:
    """Parse an ISO calendar date.

    A full ISO datetime is accepted and truncated to its date. Returns None
    for empty or unparseable input instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def is_today(value: str | date | None, now: datetime | None = None) -> bool:
    due = parse_date(value)
    return due is not None and due == _resolve_now(now).date()


def is_tomorrow(value: str | date | None, now: datetime | None = None) -> bool:
    due = parse_date(value)
    return due is not None and due == _resolve_now(now).date() + timedelta(days=1)


def is_overdue(value: str | date | None, now: datetime | None = None) -> bool:
    """True when the due date is strictly before today. Today is never overdue."""
    due = parse_date(value)
    return due is not None and due < _resolve_now(now).date()


def days_until(value: str | date | None, now: datetime | None = None) -> int | None:
    """Whole days from now until local midnight of the due date, rounded up.

    Negative for past dates; None when there is no usable date.
    """
    due = parse_date(value)
    if due is None:
        return None
    delta = datetime.combine(due, time.min) - _resolve_now(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def sort_key_date(value: str | date | None) -> date:
    """Date used for ordering; missing or malformed dates sort last."""
    return parse_date(value) or date.max


def format_for_display(
    value: str | date | None,
    now: datetime | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Human label for a due date.

    "Today" and "Tomorrow" get fixed words; other dates render with weekday,
    day, month and year. Unparseable input is returned unchanged.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ""
    due = parse_date(value)
    if due is None:
        return str(value)
    if is_today(due, now):
        return label("today", language)
    if is_tomorrow(due, now):
        return label("tomorrow", language)

    weekdays = WEEKDAY_NAMES.get(language, WEEKDAY_NAMES[DEFAULT_LANGUAGE])
    months = MONTH_NAMES.get(language, MONTH_NAMES[DEFAULT_LANGUAGE])
    weekday = weekdays[due.weekday()]
    month = months[due.month - 1]
    if language == "id":
        return f"{weekday}, {due.day} {month} {due.year}"
    return f"{weekday}, {month} {due.day}, {due.year}"
