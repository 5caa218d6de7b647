"""Configuration models.

The storage section selects the slot storage backend that holds the task
blob; the UI section controls display language and the default filter.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .task import FilterMode

SUPPORTED_LANGUAGES = ("en", "id")


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["json", "sqlite", "memory"] = Field(default="json")
    path: str | None = Field(
        default=None,
        description="Data directory (json) or database file (sqlite); "
        "defaults to the platform data directory",
    )


class UIConfig(BaseModel):
    """UI configuration."""

    language: str = Field(default="en")
    default_filter: FilterMode = Field(default=FilterMode.ALL)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Only languages with a label table are accepted."""
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language '{v}'. "
                f"Choose one of: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "json", "yaml"] = Field(default="pretty")


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(default="info")


class AppConfig(BaseModel):
    """Main application configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
