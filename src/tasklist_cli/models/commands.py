"""Typed commands emitted by the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .task import FilterMode


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddCommand(_Command):
    """Create a task from raw form input."""

    text: str
    date: str | None = None


class ToggleCommand(_Command):
    """Flip the done flag of a task."""

    id: str


class DeleteCommand(_Command):
    """Remove a task."""

    id: str


class EditCommand(_Command):
    """Take a task out of the list so its values can be re-entered."""

    id: str


class ClearCommand(_Command):
    """Remove every task."""


class SetFilterCommand(_Command):
    """Change the active filter mode."""

    mode: FilterMode


class SearchCommand(_Command):
    """Change the active search term."""

    term: str = ""


Command = (
    AddCommand
    | ToggleCommand
    | DeleteCommand
    | EditCommand
    | ClearCommand
    | SetFilterCommand
    | SearchCommand
)
