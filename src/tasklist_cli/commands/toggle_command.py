"""Command 'toggle' of tasklist-cli"""

from typing import Annotated

import typer

from tasklist_cli.models import ToggleCommand
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.formatters import format_notification

from .decorators import command_wrapper

app = typer.Typer()


@app.command("toggle")
@command_wrapper
def toggle_command(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique suffix")],
) -> None:
    """Mark a task done, or not done if it already is."""
    with get_controller() as controller:
        resolved = resolve_task_id((t.id for t in controller.store.tasks), task_id)
        result = controller.dispatch(ToggleCommand(id=resolved))
        format_notification(result.notification)
