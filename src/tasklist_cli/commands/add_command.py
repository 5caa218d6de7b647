"""Command 'add' of tasklist-cli"""

from typing import Annotated

import typer

from tasklist_cli.models import AddCommand
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_date_warning, format_notification

from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add_command(
    text: Annotated[str, typer.Argument(help="Task description")],
    date: Annotated[
        str | None, typer.Option("--date", "-d", help="Due date (YYYY-MM-DD)")
    ] = None,
) -> None:
    """Add a task with a due date."""
    with get_controller() as controller:
        result = controller.dispatch(AddCommand(text=text, date=date))
        if not result.ok:
            raise AppError(
                f"{result.error_field}: {result.error_message}", ERROR_INVALID_ARGS
            )

        format_date_warning(result.task.date, controller.language)
        format_notification(result.notification)
        console.print(f"[dim]ID: {result.task.id}[/dim]")
