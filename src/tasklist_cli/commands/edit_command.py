"""Command 'edit' of tasklist-cli

Editing takes the task out of the list and adds it back with the new
values, so the edited task gets a new ID.
"""

from typing import Annotated

import typer

from tasklist_cli.core.labels import label
from tasklist_cli.models import AddCommand, EditCommand
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_date_warning, format_notification

from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


@app.command("edit")
@command_wrapper
def edit_command(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique suffix")],
    text: Annotated[
        str | None, typer.Option("--text", "-t", help="New description")
    ] = None,
    date: Annotated[
        str | None, typer.Option("--date", "-d", help="New due date (YYYY-MM-DD)")
    ] = None,
) -> None:
    """Edit a task's text and due date.

    Without --text or --date, prompts for both, prefilled with the current
    values.
    """
    with get_controller() as controller:
        language = controller.language
        resolved = resolve_task_id((t.id for t in controller.store.tasks), task_id)
        current = controller.store.get(resolved)

        if text is None and date is None:
            text = typer.prompt("Task", default=current.text)
            date = typer.prompt("Due date", default=current.date or "")
        new_text = current.text if text is None else text
        new_date = current.date if date is None else date

        # Validated before the old task is taken out
        if not new_text.strip():
            raise AppError(
                f"text: {label('error.empty_text', language)}", ERROR_INVALID_ARGS
            )
        if not (new_date or "").strip():
            raise AppError(
                f"date: {label('error.missing_date', language)}", ERROR_INVALID_ARGS
            )

        started = controller.dispatch(EditCommand(id=resolved))
        format_notification(started.notification)

        result = controller.dispatch(AddCommand(text=new_text, date=new_date))
        format_date_warning(result.task.date, language)
        format_notification(result.notification)
        console.print(f"[dim]ID: {result.task.id}[/dim]")
