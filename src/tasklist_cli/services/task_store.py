"""Task store - the single owner of the task collection.

Every mutation writes the full collection through the persistence adapter
before returning, then notifies subscribers.
"""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable, Iterator
from datetime import UTC, datetime

from tasklist_cli.errors import EmptyTextError, MissingDateError, TaskNotFoundError
from tasklist_cli.models import EditDraft, Task

from .persistence import TaskPersistence

logger = logging.getLogger(__name__)

Subscriber = Callable[["TaskStore"], None]

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number: int) -> str:
    digits = []
    while True:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
        if number == 0:
            break
    return "".join(reversed(digits))


def generate_task_id() -> str:
    """Millisecond timestamp in base 36 followed by six random characters."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return _to_base36(time.time_ns() // 1_000_000) + suffix


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """Owns the in-memory task collection.

    Args:
        persistence: Adapter the collection is loaded from and saved to
        clock: Returns the current instant, used for ``created_at``
        id_factory: Returns a fresh task id
    """

    def __init__(
        self,
        persistence: TaskPersistence,
        *,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = generate_task_id,
    ):
        self._persistence = persistence
        self._clock = clock
        self._id_factory = id_factory
        self._subscribers: list[Subscriber] = []
        self._tasks: list[Task] = persistence.load()
        logger.info(
            "TaskStore ready storage=%s total=%d",
            persistence.storage.storage_type,
            len(self._tasks),
        )

    # ---- queries ----

    @property
    def persistence(self) -> TaskPersistence:
        return self._persistence

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot of the collection."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._tasks)

    # ---- subscriptions ----

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback(store)`` after every mutation.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Drop subscribers and release the storage backend."""
        self._subscribers.clear()
        self._persistence.storage.close()

    # ---- mutations ----

    def add(self, text: str, date: str | None) -> Task:
        """Create a task from raw input.

        Raises:
            EmptyTextError: Text is empty after trimming
            MissingDateError: No due date given
        """
        trimmed = (text or "").strip()
        if not trimmed:
            raise EmptyTextError()
        due = (date or "").strip()
        if not due:
            raise MissingDateError()

        task = Task(
            id=self._new_id(),
            text=trimmed,
            date=due,
            done=False,
            created_at=self._next_created_at(),
        )
        self._commit("add", task.id, [*self._tasks, task])
        return task

    def toggle_done(self, task_id: str) -> Task:
        """Flip the done flag.

        Raises:
            TaskNotFoundError: No task with that id
        """
        index = self._index_of(task_id)
        updated = self._tasks[index].model_copy(
            update={"done": not self._tasks[index].done}
        )
        tasks = list(self._tasks)
        tasks[index] = updated
        self._commit("toggle", task_id, tasks)
        return updated

    def remove(self, task_id: str) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: No task with that id
        """
        index = self._index_of(task_id)
        self._commit("remove", task_id, self._without(index))

    def clear(self) -> int:
        """Delete every task and return how many there were."""
        removed = len(self._tasks)
        self._commit("clear", str(removed), [])
        return removed

    def take_for_edit(self, task_id: str) -> EditDraft | None:
        """Remove a task and hand back its text and date for re-entry.

        The re-submitted task is a new task with a new id and timestamp.
        Returns None when the id does not exist.
        """
        try:
            index = self._index_of(task_id)
        except TaskNotFoundError:
            return None
        task = self._tasks[index]
        self._commit("take_for_edit", task_id, self._without(index))
        return EditDraft(text=task.text, date=task.date)

    # ---- internals ----

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def _new_id(self) -> str:
        existing = {task.id for task in self._tasks}
        while True:
            candidate = self._id_factory()
            if candidate not in existing:
                return candidate
            logger.debug("task id collision on %s, regenerating", candidate)

    def _next_created_at(self) -> datetime:
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        if self._tasks:
            latest = max(task.created_at for task in self._tasks)
            if now < latest:
                return latest
        return now

    def _without(self, index: int) -> list[Task]:
        return self._tasks[:index] + self._tasks[index + 1 :]

    def _commit(self, operation: str, detail: str, tasks: list[Task]) -> None:
        # the in-memory collection only changes once the save has succeeded
        self._persistence.save(tasks)
        self._tasks = tasks
        logger.debug("task store %s %s total=%d", operation, detail, len(self._tasks))
        for callback in list(self._subscribers):
            callback(self)
