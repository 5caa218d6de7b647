"""Slot storage adapters."""

from .json_file import JsonFileSlotStorage
from .memory import MemorySlotStorage
from .sqlite import SqliteSlotStorage

__all__ = ["JsonFileSlotStorage", "MemorySlotStorage", "SqliteSlotStorage"]
