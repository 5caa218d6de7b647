"""Configuration management for tasklist-cli."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from tasklist_cli.models import AppConfig

logger = logging.getLogger(__name__)

_APP_NAME = "tasklist_cli"


class ConfigManager:
    """Loads, edits and saves the JSON configuration file."""

    def __init__(self, config_dir: str | Path | None = None):
        self.config_dir = Path(config_dir or user_config_dir(_APP_NAME))
        self.config_file = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from file; defaults when missing or unreadable."""
        if not self.config_file.exists():
            return AppConfig()
        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)
            return AppConfig(**data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
            return AppConfig()

    def save_config(self, config: AppConfig | None = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(config.model_dump_json(indent=2))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: The key does not name a configuration field
            pydantic.ValidationError: The value is not valid for the field
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        self._config = AppConfig(**config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration to defaults."""
        if key is not None:
            self.set(key, self.get_from_config(AppConfig(), key))
            return
        self._config = AppConfig()
        self.save_config()

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: ConfigManager | None = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
