"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tasklist_cli.utils.ui.console import get_error_console


def suggest_commands(
    attempted: str, available: list[str], limit: int = 3
) -> list[str]:
    """Commands the user probably meant: prefix matches first, then look-alikes."""
    prefixed = sorted(name for name in available if name.startswith(attempted))
    # Cutoff 0.6 for similarity
    similar = get_close_matches(attempted, available, n=limit, cutoff=0.6)
    suggestions = prefixed + [name for name in similar if name not in prefixed]
    return suggestions[:limit]


class SuggestingGroup(TyperGroup):
    """Typer group that accepts unique command prefixes and suggests on typos.

    ``tasklist tog ID`` runs ``toggle``; ``tasklist c`` is ambiguous between
    ``clear`` and ``config`` and lists both.
    """

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        matches = [
            name for name in self.list_commands(ctx) if name.startswith(cmd_name)
        ]
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        return None

    def resolve_command(self, ctx, args):
        """Resolve prefixes to the full command name; suggest on errors."""
        try:
            name, command, rest = super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                suggestions = suggest_commands(attempted, list(self.commands.keys()))

                if suggestions:
                    console = get_error_console()
                    console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    console.print()
                    if len(suggestions) == 1:
                        console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        console.print(f"        {suggestion}")
                    raise typer.Exit(1) from e
            raise
        return (command.name if command else name), command, rest
