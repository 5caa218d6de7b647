"""In-process slot storage."""

from __future__ import annotations

from tasklist_cli.repositories import SlotStorage


class MemorySlotStorage(SlotStorage):
    """Keeps slots in a dict; contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, blob: str) -> None:
        self._slots[key] = blob

    def clear(self, key: str) -> None:
        self._slots.pop(key, None)

    @property
    def storage_type(self) -> str:
        return "memory"
