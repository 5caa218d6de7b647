"""Command 'delete' of tasklist-cli"""

from typing import Annotated

import typer

from tasklist_cli.models import DeleteCommand
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_notification

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("delete")
@command_wrapper
def delete_command(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique suffix")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation prompt")
    ] = False,
) -> None:
    """Delete a task."""
    with get_controller() as controller:
        resolved = resolve_task_id((t.id for t in controller.store.tasks), task_id)
        task = controller.store.get(resolved)

        if not yes and not typer.confirm(f'Delete task "{task.text}"?'):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

        result = controller.dispatch(DeleteCommand(id=resolved))
        format_notification(result.notification)
