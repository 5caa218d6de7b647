"""Task data models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class FilterMode(StrEnum):
    """Subset of tasks selected for display."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    TODAY = "today"


class Priority(StrEnum):
    """Urgency tier derived from how close the due date is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Task(BaseModel):
    """A single to-do entry.

    Instances are frozen; the store replaces a task with an updated copy.

    Attributes:
        id: Opaque unique token, assigned at creation
        text: Trimmed, non-empty task description
        date: Due date as an ISO ``YYYY-MM-DD`` string, None when unscheduled
        done: Completion flag
        created_at: Creation instant (UTC), serialized as ``createdAt``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    date: str | None = None
    done: bool = False
    created_at: datetime = Field(alias="createdAt")

    @field_validator("date", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        """UTC with millisecond precision, exactly what gets persisted."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.astimezone(UTC)
        return value.replace(microsecond=value.microsecond // 1000 * 1000)

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        # 2024-06-10T09:00:00.000Z
        stamp = value.isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")

    def to_record(self) -> dict:
        """Return the persisted JSON record for this task."""
        return self.model_dump(mode="json", by_alias=True)


class EditDraft(BaseModel):
    """Prior values of a task taken out of the list for editing."""

    model_config = ConfigDict(frozen=True)

    text: str
    date: str | None = None
