"""Command dispatch and view synchronization.

The controller is the seam between the presentation layer and the core: the
presentation layer sends typed commands, the controller applies them to the
store, and hands back a fresh render model together with any notification
or validation message to display.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from functools import singledispatchmethod

from tasklist_cli.core.labels import DEFAULT_LANGUAGE, label
from tasklist_cli.core.query import visible_tasks
from tasklist_cli.core.renderer import render_model
from tasklist_cli.errors import TaskNotFoundError, TaskValidationError
from tasklist_cli.models import (
    AddCommand,
    ClearCommand,
    CommandResult,
    DeleteCommand,
    EditCommand,
    FilterMode,
    Notification,
    NotificationKind,
    RenderModel,
    SearchCommand,
    SetFilterCommand,
    ToggleCommand,
)

from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskListController:
    """Applies commands to a store and keeps the render model current.

    Args:
        store: Task store owning the collection
        filter_mode: Initial filter mode
        search_term: Initial search term
        language: Display language for labels and notifications
        now: Optional clock for date classification (local time)
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        filter_mode: FilterMode = FilterMode.ALL,
        search_term: str = "",
        language: str = DEFAULT_LANGUAGE,
        now: Callable[[], datetime] | None = None,
    ):
        self.store = store
        self.filter_mode = FilterMode(filter_mode)
        self.search_term = search_term
        self.language = language
        self._now = now
        self._view: RenderModel | None = None
        self._unsubscribe = store.subscribe(self._on_store_changed)

    # ---- view ----

    def view(self) -> RenderModel:
        """Current render model, recomputed when the state has changed."""
        if self._view is None:
            self._view = self._render()
        return self._view

    def _render(self) -> RenderModel:
        now = self._now() if self._now else None
        snapshot = self.store.tasks
        visible = visible_tasks(snapshot, self.filter_mode, self.search_term, now)
        return render_model(visible, snapshot, now, self.language)

    def _on_store_changed(self, store: TaskStore) -> None:
        self._view = self._render()

    def close(self) -> None:
        """Stop following the store and release its storage backend."""
        self._unsubscribe()
        self.store.close()

    def __enter__(self) -> TaskListController:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- dispatch ----

    def _notify(self, key: str, kind: NotificationKind) -> Notification:
        return Notification(kind=kind, message=label(key, self.language))

    def _result(self, **kwargs) -> CommandResult:
        return CommandResult(view=self.view(), **kwargs)

    @singledispatchmethod
    def dispatch(self, command) -> CommandResult:
        """Apply a command and return the resulting view."""
        raise TypeError(f"Unsupported command: {type(command).__name__}")

    @dispatch.register
    def _add(self, command: AddCommand) -> CommandResult:
        try:
            task = self.store.add(command.text, command.date)
        except TaskValidationError as e:
            logger.info("add rejected: %s", e.code)
            return self._result(
                error_field=e.field,
                error_message=label(f"error.{e.code}", self.language),
            )
        return self._result(
            task=task, notification=self._notify("notify.added", NotificationKind.SUCCESS)
        )

    @dispatch.register
    def _toggle(self, command: ToggleCommand) -> CommandResult:
        try:
            task = self.store.toggle_done(command.id)
        except TaskNotFoundError:
            logger.info("toggle ignored, no task %s", command.id)
            return self._result()
        key = "notify.completed" if task.done else "notify.reopened"
        return self._result(
            task=task, notification=self._notify(key, NotificationKind.SUCCESS)
        )

    @dispatch.register
    def _delete(self, command: DeleteCommand) -> CommandResult:
        try:
            self.store.remove(command.id)
        except TaskNotFoundError:
            logger.info("delete ignored, no task %s", command.id)
            return self._result()
        return self._result(
            notification=self._notify("notify.deleted", NotificationKind.SUCCESS)
        )

    @dispatch.register
    def _edit(self, command: EditCommand) -> CommandResult:
        draft = self.store.take_for_edit(command.id)
        if draft is None:
            logger.info("edit ignored, no task %s", command.id)
            return self._result()
        return self._result(
            draft=draft,
            notification=self._notify("notify.edit_started", NotificationKind.INFO),
        )

    @dispatch.register
    def _clear(self, command: ClearCommand) -> CommandResult:
        if len(self.store) == 0:
            return self._result(
                notification=self._notify(
                    "notify.nothing_to_clear", NotificationKind.INFO
                )
            )
        self.store.clear()
        return self._result(
            notification=self._notify("notify.cleared", NotificationKind.SUCCESS)
        )

    @dispatch.register
    def _set_filter(self, command: SetFilterCommand) -> CommandResult:
        self.filter_mode = command.mode
        self._view = None
        return self._result()

    @dispatch.register
    def _search(self, command: SearchCommand) -> CommandResult:
        self.search_term = command.term
        self._view = None
        return self._result()
