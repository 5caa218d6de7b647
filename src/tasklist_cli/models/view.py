"""Render model handed to the presentation layer."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .task import EditDraft, Priority, Task


class TaskRow(BaseModel):
    """One visible task, ready to draw.

    Attributes:
        id: Task id (row actions refer to it)
        title: Task text
        date_label: Formatted due date, or the "no date" sentinel label
        priority: Urgency tier, None when the task is done or undated
        priority_label: Display text for the tier, or the overdue label
        is_overdue: Due date is in the past and the task is not done
        done: Completion flag, for styling
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    date_label: str
    priority: Priority | None = None
    priority_label: str | None = None
    is_overdue: bool = False
    done: bool = False


class TaskCounts(BaseModel):
    """Counters over the whole collection."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    pending: int = 0
    completed: int = 0


class RenderModel(BaseModel):
    """Everything needed to draw the list and its counters."""

    model_config = ConfigDict(frozen=True)

    rows: list[TaskRow] = Field(default_factory=list)
    counts: TaskCounts = Field(default_factory=TaskCounts)
    is_empty: bool = True


class NotificationKind(StrEnum):
    SUCCESS = "success"
    INFO = "info"


class Notification(BaseModel):
    """Transient message shown after a command."""

    model_config = ConfigDict(frozen=True)

    kind: NotificationKind
    message: str


class CommandResult(BaseModel):
    """Outcome of dispatching a command.

    Attributes:
        view: Render model reflecting the state after the command
        notification: Message to flash, if any
        task: Task created or updated by the command
        draft: Prefill values for an edit
        error_field: Input field a validation error belongs to
        error_message: Localized validation message
    """

    view: RenderModel
    notification: Notification | None = None
    task: Task | None = None
    draft: EditDraft | None = None
    error_field: str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_field is None
