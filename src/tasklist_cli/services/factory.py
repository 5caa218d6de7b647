"""Wire storage, store and controller together from configuration.

The storage backend is chosen once at startup and injected into the store;
nothing below this module knows which backend is in use.
"""

from __future__ import annotations

from pathlib import Path

from tasklist_cli.adapters import (
    JsonFileSlotStorage,
    MemorySlotStorage,
    SqliteSlotStorage,
)
from tasklist_cli.config import get_config_manager
from tasklist_cli.models import AppConfig, FilterMode
from tasklist_cli.repositories import SlotStorage

from .controller import TaskListController
from .persistence import TaskPersistence
from .task_store import TaskStore


def create_storage(config: AppConfig) -> SlotStorage:
    """Instantiate the slot storage selected by ``storage.backend``."""
    backend = config.storage.backend
    path = Path(config.storage.path).expanduser() if config.storage.path else None
    if backend == "json":
        return JsonFileSlotStorage(path)
    if backend == "sqlite":
        return SqliteSlotStorage(path)
    if backend == "memory":
        return MemorySlotStorage()
    raise ValueError(f"Unknown storage backend: {backend}")


def build_store(config: AppConfig) -> TaskStore:
    return TaskStore(TaskPersistence(create_storage(config)))


def build_controller(
    config: AppConfig,
    *,
    filter_mode: FilterMode | None = None,
    search_term: str = "",
) -> TaskListController:
    """Build a controller over a freshly loaded store."""
    return TaskListController(
        build_store(config),
        filter_mode=filter_mode or config.ui.default_filter,
        search_term=search_term,
        language=config.ui.language,
    )


def get_controller(
    filter_mode: FilterMode | None = None, search_term: str = ""
) -> TaskListController:
    """Controller built from the user's saved configuration."""
    return build_controller(
        get_config_manager().config,
        filter_mode=filter_mode,
        search_term=search_term,
    )
