"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from unittest.mock import patch

import pytest

from tasklist_cli.adapters import MemorySlotStorage
from tasklist_cli.models import Task
from tasklist_cli.services import TaskPersistence, TaskStore

# Local "now" used by date-dependent tests: Monday 10 June 2024, noon
NOW = datetime(2024, 6, 10, 12, 0, 0)


# ---------------------------------------------------------------------------
# Filesystem / singleton isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs lookup at tmp_path and reset singletons."""
    import tasklist_cli.config as config_mod
    import tasklist_cli.utils.logger as logger_mod

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    config_mod._config_manager = None
    logger_mod._logger = None
    app_logger = logging.getLogger("tasklist_cli")
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)

    with (
        patch("tasklist_cli.config.user_config_dir", return_value=str(config_dir)),
        patch("tasklist_cli.adapters.json_file.user_data_dir", return_value=str(data_dir)),
        patch("tasklist_cli.adapters.sqlite.user_data_dir", return_value=str(data_dir)),
        patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path

    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)
    config_mod._config_manager = None
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


def make_task(
    task_id: str,
    text: str = "Task",
    date: str | None = "2024-06-20",
    done: bool = False,
    created_at: datetime | None = None,
) -> Task:
    """Build a Task directly (tests only; the app creates tasks via the store)."""
    return Task(
        id=task_id,
        text=text,
        date=date,
        done=done,
        created_at=created_at or datetime(2024, 6, 1, 9, 0, 0, tzinfo=UTC),
    )


@pytest.fixture()
def storage():
    return MemorySlotStorage()


@pytest.fixture()
def persistence(storage):
    return TaskPersistence(storage)


@pytest.fixture()
def store(persistence):
    return TaskStore(persistence)


@pytest.fixture()
def task_factory():
    """Return the make_task helper."""
    return make_task


@pytest.fixture()
def now():
    """Fixed local 'now' for date classification."""
    return NOW
