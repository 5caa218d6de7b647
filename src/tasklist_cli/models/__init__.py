"""tasklist-cli domain models.

Pydantic models for tasks, the typed command interface and the render model
produced for the presentation layer.
"""

from .commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    SearchCommand,
    SetFilterCommand,
    ToggleCommand,
)
from .config_models import (
    AppConfig,
    LoggingConfig,
    OutputConfig,
    StorageConfig,
    UIConfig,
)
from .task import EditDraft, FilterMode, Priority, Task
from .view import (
    CommandResult,
    Notification,
    NotificationKind,
    RenderModel,
    TaskCounts,
    TaskRow,
)

__all__ = [
    # Task models
    "Task",
    "EditDraft",
    "FilterMode",
    "Priority",
    # Commands
    "Command",
    "AddCommand",
    "ToggleCommand",
    "DeleteCommand",
    "EditCommand",
    "ClearCommand",
    "SetFilterCommand",
    "SearchCommand",
    # View models
    "RenderModel",
    "TaskRow",
    "TaskCounts",
    "Notification",
    "NotificationKind",
    "CommandResult",
    # Config models
    "AppConfig",
    "StorageConfig",
    "UIConfig",
    "LoggingConfig",
    "OutputConfig",
]
