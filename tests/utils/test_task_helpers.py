"""Tests for task id helpers."""

from __future__ import annotations

import pytest

from tasklist_cli.errors import AmbiguousTaskIdError, TaskNotFoundError
from tasklist_cli.utils.task_helpers import (
    calculate_unique_suffixes,
    resolve_task_id,
    short_ids,
)

IDS = ["lx2k9d0abc123", "lx2k9d0xyz789", "lx2k9e1qqq123"]


def test_calculate_unique_suffixes():
    lengths = calculate_unique_suffixes(IDS)

    assert lengths["lx2k9d0xyz789"] == 1
    # "123" is shared, "c123" is not
    assert lengths["lx2k9d0abc123"] == 4
    assert lengths["lx2k9e1qqq123"] == 4


def test_calculate_unique_suffixes_empty():
    assert calculate_unique_suffixes([]) == {}


def test_short_ids():
    assert short_ids(IDS) == {
        "lx2k9d0abc123": "c123",
        "lx2k9d0xyz789": "9",
        "lx2k9e1qqq123": "q123",
    }


def test_resolve_full_id():
    assert resolve_task_id(IDS, "lx2k9d0abc123") == "lx2k9d0abc123"


def test_resolve_suffix():
    assert resolve_task_id(IDS, "789") == "lx2k9d0xyz789"
    assert resolve_task_id(IDS, " c123 ") == "lx2k9d0abc123"


def test_resolve_unknown():
    with pytest.raises(TaskNotFoundError):
        resolve_task_id(IDS, "zzz")
    with pytest.raises(TaskNotFoundError):
        resolve_task_id(IDS, "")


def test_resolve_ambiguous():
    with pytest.raises(AmbiguousTaskIdError) as exc_info:
        resolve_task_id(IDS, "123")

    assert sorted(exc_info.value.matches) == ["lx2k9d0abc123", "lx2k9e1qqq123"]
