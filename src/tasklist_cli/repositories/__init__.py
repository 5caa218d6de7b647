"""Storage interfaces for tasklist-cli.

Implementations (adapters) are in:
- tasklist_cli.adapters.memory (in-process)
- tasklist_cli.adapters.json_file (one JSON file per slot)
- tasklist_cli.adapters.sqlite (SQLite key-value table)
"""

from .repository import SlotStorage

__all__ = ["SlotStorage"]
