"""Tests for TaskListController command dispatch."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tasklist_cli.models import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    FilterMode,
    NotificationKind,
    SearchCommand,
    SetFilterCommand,
    ToggleCommand,
)
from tasklist_cli.services import TaskListController


@pytest.fixture()
def controller(store, now):
    return TaskListController(store, now=lambda: now)


def _titles(result):
    return [row.title for row in result.view.rows]


def test_add_success(controller):
    result = controller.dispatch(AddCommand(text="  Buy milk ", date="2024-06-12"))

    assert result.ok
    assert result.task.text == "Buy milk"
    assert result.notification.kind == NotificationKind.SUCCESS
    assert result.notification.message == "Task added!"
    assert _titles(result) == ["Buy milk"]
    assert result.view.rows[0].priority_label == "Medium"


def test_add_validation_errors_are_returned(controller):
    empty = controller.dispatch(AddCommand(text=" ", date="2024-06-12"))
    no_date = controller.dispatch(AddCommand(text="Buy milk", date=""))

    assert not empty.ok
    assert empty.error_field == "text"
    assert empty.error_message == "Task cannot be empty."
    assert empty.notification is None
    assert no_date.error_field == "date"
    assert no_date.error_message == "Date is required."
    assert no_date.view.is_empty


def test_toggle_notifications(controller):
    task = controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12")).task

    done = controller.dispatch(ToggleCommand(id=task.id))
    undone = controller.dispatch(ToggleCommand(id=task.id))

    assert done.notification.message == "Task completed!"
    assert done.view.rows[0].done is True
    assert done.view.counts.completed == 1
    assert undone.notification.message == "Task marked as not done"
    assert undone.view.counts.pending == 1


def test_missing_ids_are_absorbed(controller):
    controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12"))
    before = controller.view()

    for command in (
        ToggleCommand(id="nope"),
        DeleteCommand(id="nope"),
        EditCommand(id="nope"),
    ):
        result = controller.dispatch(command)
        assert result.ok
        assert result.notification is None
        assert result.view == before


def test_delete(controller):
    task = controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12")).task

    result = controller.dispatch(DeleteCommand(id=task.id))

    assert result.notification.message == "Task deleted!"
    assert result.view.is_empty
    assert result.view.counts.total == 0


def test_edit_returns_draft(controller):
    task = controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12")).task

    result = controller.dispatch(EditCommand(id=task.id))

    assert result.draft.text == "Buy milk"
    assert result.draft.date == "2024-06-12"
    assert result.notification.kind == NotificationKind.INFO
    assert result.notification.message == "Now edit your task"
    assert result.view.is_empty


def test_clear_when_empty_is_info(controller):
    result = controller.dispatch(ClearCommand())

    assert result.notification.kind == NotificationKind.INFO
    assert result.notification.message == "No tasks to delete"


def test_clear(controller):
    controller.dispatch(AddCommand(text="One", date="2024-06-12"))
    controller.dispatch(AddCommand(text="Two", date="2024-06-13"))

    result = controller.dispatch(ClearCommand())

    assert result.notification.message == "All tasks deleted!"
    assert result.view.counts.total == 0


def test_filter_and_search_change_the_view(controller):
    first = controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12")).task
    controller.dispatch(AddCommand(text="Walk dog", date="2024-06-10"))
    controller.dispatch(ToggleCommand(id=first.id))

    pending = controller.dispatch(SetFilterCommand(mode=FilterMode.PENDING))
    assert _titles(pending) == ["Walk dog"]
    assert pending.view.counts.total == 2

    searched = controller.dispatch(SearchCommand(term="MILK"))
    assert _titles(searched) == ["Buy milk"]

    cleared = controller.dispatch(SearchCommand(term=""))
    assert _titles(cleared) == ["Walk dog"]


def test_view_follows_direct_store_mutations(controller, store):
    assert controller.view().is_empty

    store.add("Added elsewhere", "2024-06-12")

    assert [row.title for row in controller.view().rows] == ["Added elsewhere"]


def test_indonesian_messages(store, now):
    controller = TaskListController(store, language="id", now=lambda: now)

    added = controller.dispatch(AddCommand(text="Beli susu", date="2024-06-10"))
    invalid = controller.dispatch(AddCommand(text="", date="2024-06-10"))

    assert added.notification.message == "Tugas berhasil ditambahkan!"
    assert added.view.rows[0].date_label == "Hari ini"
    assert invalid.error_message == "Tugas tidak boleh kosong."


def test_unknown_command_type(controller):
    with pytest.raises(TypeError):
        controller.dispatch(object())


def test_close_stops_following_store(controller, store):
    controller.view()
    controller.close()

    store.add("Later", "2024-06-12")

    assert controller.view().is_empty


def test_context_manager_closes_storage(store):
    with patch.object(store.persistence.storage, "close") as close:
        with TaskListController(store) as controller:
            controller.dispatch(AddCommand(text="Buy milk", date="2024-06-12"))

    close.assert_called_once_with()
