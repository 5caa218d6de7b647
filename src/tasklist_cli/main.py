"""Main entry point for tasklist-cli."""

import typer

from tasklist_cli import __version__
from tasklist_cli.commands import (
    add_command,
    clear_command,
    config,
    delete_command,
    edit_command,
    list_command,
    toggle_command,
)
from tasklist_cli.utils.logger import log_file_path
from tasklist_cli.utils.typer_helpers import SuggestingGroup
from tasklist_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tasklist",
    cls=SuggestingGroup,
    help="A local task list with due dates, filters and priorities",
    no_args_is_help=True,
)

console = get_console()

# Task commands
app.command("add")(add_command.add_command)
app.command("list")(list_command.list_command)
app.command("toggle")(toggle_command.toggle_command)
app.command("delete")(delete_command.delete_command)
app.command("edit")(edit_command.edit_command)
app.command("clear")(clear_command.clear_command)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tasklist-cli[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {log_file_path()}[/dim]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
