"""Command 'list' of tasklist-cli"""

from typing import Annotated

import typer

from tasklist_cli.config import get_config_manager
from tasklist_cli.models import FilterMode
from tasklist_cli.services.factory import get_controller
from tasklist_cli.utils.ui.formatters import format_task_list

from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_command(
    filter_mode: Annotated[
        FilterMode | None,
        typer.Option("--filter", "-f", help="Which tasks to show"),
    ] = None,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Only tasks containing this text")
    ] = "",
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output format (pretty, json, yaml)"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """List tasks, incomplete and soonest due first.

    A search term overrides the filter.
    """
    if json_opt:
        output = "json"
    if output is None:
        output = get_config_manager().config.output.format

    with get_controller(filter_mode=filter_mode, search_term=search) as controller:
        all_ids = [task.id for task in controller.store.tasks]
        format_task_list(
            controller.view(),
            output,
            language=controller.language,
            all_task_ids=all_ids,
        )
