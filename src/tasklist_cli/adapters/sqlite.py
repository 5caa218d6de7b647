"""SQLite-backed slot storage.

Slots live in a single ``slots`` table. The connection is opened once per
adapter, in WAL mode, and closed with :meth:`SqliteSlotStorage.close`.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from tasklist_cli.repositories import SlotStorage

logger = logging.getLogger(__name__)

_APP_NAME = "tasklist_cli"
_DEFAULT_DB = "tasks.db"

SCHEMA = """
CREATE TABLE IF NOT EXISTS slots (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
)
"""


class SqliteSlotStorage(SlotStorage):
    """Stores slots as rows of a key-value table."""

    def __init__(self, db_path: str | Path | None = None):
        if db_path is None:
            db_path = Path(user_data_dir(_APP_NAME)) / _DEFAULT_DB
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        is_new_database = not self.db_path.exists()
        self._connection: sqlite3.Connection | None = sqlite3.connect(
            str(self.db_path), timeout=30.0
        )
        self._connection.execute("PRAGMA journal_mode=WAL")
        self._connection.execute(SCHEMA)
        self._connection.commit()

        if is_new_database:
            self.db_path.chmod(0o600)
            logger.info("created slot database at %s", self.db_path)

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise RuntimeError("SqliteSlotStorage is closed")
        return self._connection

    def get(self, key: str) -> str | None:
        row = self.connection.execute(
            "SELECT value FROM slots WHERE key = ?", (key,)
        ).fetchone()
        return row[0] if row else None

    def set(self, key: str, blob: str) -> None:
        with self.connection:
            self.connection.execute(
                """
                INSERT INTO slots (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = strftime('%Y-%m-%dT%H:%M:%fZ', 'now')
                """,
                (key, blob),
            )

    def clear(self, key: str) -> None:
        with self.connection:
            self.connection.execute("DELETE FROM slots WHERE key = ?", (key,))

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    @property
    def storage_type(self) -> str:
        return "sqlite"
