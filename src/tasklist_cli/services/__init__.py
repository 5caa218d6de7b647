"""Stateful services: persistence, the task store and the controller."""

from .controller import TaskListController
from .persistence import STORAGE_KEY, TaskPersistence
from .task_store import TaskStore, generate_task_id

__all__ = [
    "STORAGE_KEY",
    "TaskListController",
    "TaskPersistence",
    "TaskStore",
    "generate_task_id",
]
