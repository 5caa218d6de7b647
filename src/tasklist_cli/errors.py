"""Exception hierarchy for tasklist-cli.

Validation errors are meant to be shown next to the offending input field;
the other errors are recoverable conditions that callers absorb or report.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all task list errors."""


class TaskValidationError(TaskListError):
    """User input was rejected; no state was changed.

    Attributes:
        field: Name of the input field the error belongs to ("text" or "date")
        code: Stable machine-readable error code
    """

    field: str = ""
    code: str = "invalid"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)


class EmptyTextError(TaskValidationError):
    """Task text is empty or whitespace only."""

    field = "text"
    code = "empty_text"


class MissingDateError(TaskValidationError):
    """No due date was supplied."""

    field = "date"
    code = "missing_date"


class TaskNotFoundError(TaskListError):
    """The referenced task id does not exist (any more)."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class AmbiguousTaskIdError(TaskListError):
    """An abbreviated task id matches more than one task."""

    def __init__(self, fragment: str, matches: list[str]):
        super().__init__(
            f"Ambiguous task id '{fragment}' matches {len(matches)} tasks: "
            + ", ".join(matches)
        )
        self.fragment = fragment
        self.matches = matches


class PersistenceCorruptError(TaskListError):
    """The stored task blob could not be parsed."""
