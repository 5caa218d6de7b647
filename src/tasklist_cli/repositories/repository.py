"""Storage abstraction for tasklist-cli.

The task collection is persisted as a single blob in a named slot. This
module defines the port; implementations live in ``tasklist_cli.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SlotStorage(ABC):
    """Abstract durable key-value slot store.

    Each key holds one opaque text blob which is always read and written
    wholesale.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the blob stored under key, or None if the slot is empty.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("SlotStorage.get() must be implemented by adapter")

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        """Overwrite the slot with blob.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("SlotStorage.set() must be implemented by adapter")

    @abstractmethod
    def clear(self, key: str) -> None:
        """Empty the slot. Clearing an empty slot is not an error.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "SlotStorage.clear() must be implemented by adapter"
        )

    def close(self) -> None:
        """Release any resources held by the adapter."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Storage type identifier (for logging/debugging)."""
