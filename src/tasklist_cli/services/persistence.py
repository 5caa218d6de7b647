"""Serialize the task collection to and from a storage slot."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from tasklist_cli.errors import PersistenceCorruptError
from tasklist_cli.models import Task
from tasklist_cli.repositories import SlotStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "cc_todos_v2"

_TASK_LIST = TypeAdapter(list[Task])


class TaskPersistence:
    """Reads and writes the whole collection as one JSON array.

    Records use the field names ``id``, ``text``, ``date``, ``done`` and
    ``createdAt``.
    """

    def __init__(self, storage: SlotStorage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the slot with the full collection."""
        records = [task.to_record() for task in tasks]
        self.storage.set(self.key, json.dumps(records, ensure_ascii=False))
        logger.debug("saved %d task(s) to %s slot", len(records), self.key)

    def read(self) -> list[Task]:
        """Parse the stored collection.

        Returns an empty list when the slot is empty.

        Raises:
            PersistenceCorruptError: The blob is unreadable or not a valid task
                array
        """
        try:
            raw = self.storage.get(self.key)
        except UnicodeDecodeError as e:
            raise PersistenceCorruptError(f"stored tasks are not UTF-8 text: {e}") from e
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceCorruptError(f"stored tasks are not JSON: {e}") from e
        if not isinstance(data, list):
            raise PersistenceCorruptError(
                f"stored tasks must be an array, got {type(data).__name__}"
            )
        try:
            return _TASK_LIST.validate_python(data)
        except ValidationError as e:
            raise PersistenceCorruptError(
                f"stored tasks failed validation: {e.error_count()} error(s)"
            ) from e

    def load(self) -> list[Task]:
        """Like :meth:`read`, but a corrupt blob yields an empty collection."""
        try:
            return self.read()
        except PersistenceCorruptError as e:
            logger.warning("Failed parsing stored tasks, starting empty: %s", e)
            return []
