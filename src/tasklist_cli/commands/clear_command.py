"""Command 'clear' of tasklist-cli"""

from typing import Annotated

import typer

from tasklist_cli.models import ClearCommand
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_notification

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("clear")
@command_wrapper
def clear_command(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation prompt")
    ] = False,
) -> None:
    """Delete every task."""
    with get_controller() as controller:
        total = len(controller.store)

        if total and not yes:
            confirmed = typer.confirm(
                f"Delete all {total} task(s)? This cannot be undone."
            )
            if not confirmed:
                console.print("[yellow]Cancelled[/yellow]")
                raise typer.Exit(0)

        result = controller.dispatch(ClearCommand())
        format_notification(result.notification)
