"""Tests for the render model."""

from __future__ import annotations

from datetime import datetime

from tasklist_cli.core.query import visible_tasks
from tasklist_cli.core.renderer import render_model, render_row
from tasklist_cli.models import FilterMode, Priority


def test_overdue_task_shows_overdue_label(task_factory):
    now = datetime(2024, 6, 10, 9, 0, 0)
    task = task_factory("late", date="2024-06-09")

    row = render_row(task, now)

    assert row.is_overdue is True
    assert row.priority == Priority.HIGH
    assert row.priority_label == "Overdue"


def test_due_today_shows_high(task_factory, now):
    row = render_row(task_factory("t", date="2024-06-10"), now)

    assert row.priority == Priority.HIGH
    assert row.priority_label == "High"
    assert row.date_label == "Today"
    assert row.is_overdue is False


def test_medium_and_low_labels(task_factory, now):
    assert render_row(task_factory("m", date="2024-06-12"), now).priority_label == "Medium"
    assert render_row(task_factory("l", date="2024-06-20"), now).priority_label == "Low"


def test_done_task_has_no_priority(task_factory, now):
    row = render_row(task_factory("d", date="2024-06-01", done=True), now)

    assert row.priority is None
    assert row.priority_label is None
    assert row.is_overdue is False
    assert row.done is True


def test_undated_task_uses_sentinel_label(task_factory, now):
    row = render_row(task_factory("u", date=None), now)

    assert row.date_label == "No date set"
    assert row.priority is None
    assert row.priority_label is None


def test_indonesian_labels(task_factory, now):
    overdue = render_row(task_factory("o", date="2024-06-01"), now, language="id")
    undated = render_row(task_factory("u", date=None), now, language="id")
    high = render_row(task_factory("h", date="2024-06-10"), now, language="id")

    assert overdue.priority_label == "Terlambat"
    assert undated.date_label == "Tanggal tidak ditentukan"
    assert high.priority_label == "Tinggi"


def test_counts_cover_whole_collection(task_factory, now):
    collection = [
        task_factory("a"),
        task_factory("b", done=True),
        task_factory("c", done=True),
    ]
    visible = visible_tasks(collection, FilterMode.PENDING, "", now)

    model = render_model(visible, collection, now)

    assert [row.id for row in model.rows] == ["a"]
    assert model.counts.total == 3
    assert model.counts.completed == 2
    assert model.counts.pending == 1
    assert model.is_empty is False


def test_empty_visible_set(task_factory, now):
    collection = [task_factory("a")]

    model = render_model([], collection, now)

    assert model.is_empty is True
    assert model.rows == []
    assert model.counts.total == 1


def test_rendering_is_idempotent(task_factory, now):
    collection = [
        task_factory("a", date="2024-06-09"),
        task_factory("b", date=None),
        task_factory("c", done=True),
    ]
    visible = visible_tasks(collection, FilterMode.ALL, "", now)

    first = render_model(visible, collection, now)
    second = render_model(visible, collection, now)

    assert first == second
    assert [t.id for t in visible] == ["a", "b", "c"]
