"""File-backed slot storage.

Each slot is a file named ``<key>.json`` inside the data directory. Writes go
to a temporary file in the same directory which is then renamed over the
target, so a reader never sees a half-written blob.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from tasklist_cli.repositories import SlotStorage

logger = logging.getLogger(__name__)

_APP_NAME = "tasklist_cli"
_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileSlotStorage(SlotStorage):
    """Stores every slot as its own file."""

    def __init__(self, data_dir: str | Path | None = None):
        if data_dir is None:
            data_dir = user_data_dir(_APP_NAME)
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid slot key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, blob: str) -> None:
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.data_dir, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(blob)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        path.chmod(0o600)
        logger.debug("slot written: %s (%d bytes)", path, len(blob))

    def clear(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    @property
    def storage_type(self) -> str:
        return "json"
