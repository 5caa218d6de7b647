"""Output formatters for different formats."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tasklist_cli.core.clock import parse_date
from tasklist_cli.core.labels import label
from tasklist_cli.models import Notification, NotificationKind, Priority, RenderModel
from tasklist_cli.utils.task_helpers import short_ids

from .console import get_console, get_error_console

PRIORITY_STYLES = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}
OVERDUE_STYLE = "bold white on red"


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_error_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message on stderr."""
    get_error_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")


def format_date_warning(value: str | None, language: str = "en") -> None:
    """Warn when a due date is free text rather than a calendar date."""
    if value and value.strip() and parse_date(value) is None:
        message = label("warning.unparsed_date", language)
        format_warning(message.format(value=escape(value)))


def format_notification(notification: Notification | None) -> None:
    """Show a controller notification, if there is one."""
    if notification is None:
        return
    if notification.kind == NotificationKind.SUCCESS:
        format_success(notification.message)
    else:
        format_info(notification.message)


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (config values, single records)."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        format_single_item(data)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a (nested) dict as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in _flatten(item, prefix):
        if isinstance(value, bool):
            formatted = "✓" if value else "✗"
        elif value is None:
            formatted = "-"
        else:
            formatted = str(value)
        table.add_row(key, formatted)
    get_console().print(table)


def _flatten(item: dict, prefix: str = "") -> list[tuple[str, Any]]:
    pairs: list[tuple[str, Any]] = []
    for key, value in item.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            pairs.extend(_flatten(value, f"{full_key}."))
        else:
            pairs.append((full_key, value))
    return pairs


def format_task_list(
    model: RenderModel,
    output_format: str = "pretty",
    language: str = "en",
    all_task_ids: list[str] | None = None,
) -> None:
    """Draw a render model.

    Args:
        model: Render model to draw
        output_format: "pretty", "json" or "yaml"
        language: Language of the empty-state placeholder
        all_task_ids: Every id in the collection, so the short ids shown are
            unique across the whole list and not just the visible rows
    """
    if output_format == "json":
        print(json.dumps(model.model_dump(mode="json"), indent=2))
        return
    if output_format == "yaml":
        print(
            yaml.dump(
                model.model_dump(mode="json"),
                default_flow_style=False,
                sort_keys=False,
            )
        )
        return

    console = get_console()
    if model.is_empty:
        console.print(f"[dim]{label('empty', language)}[/dim]")
    else:
        ids = all_task_ids or [row.id for row in model.rows]
        shorts = short_ids(ids)

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("", no_wrap=True)
        table.add_column("Task")
        table.add_column("Due", no_wrap=True)
        table.add_column("Priority", no_wrap=True)

        for row in model.rows:
            title = Text(row.title, style="strike dim" if row.done else "")
            if row.priority_label is None:
                priority = Text("-", style="dim")
            elif row.is_overdue:
                priority = Text(row.priority_label, style=OVERDUE_STYLE)
            else:
                priority = Text(row.priority_label, style=PRIORITY_STYLES[row.priority])
            table.add_row(
                shorts.get(row.id, row.id),
                "✓" if row.done else "○",
                title,
                row.date_label,
                priority,
            )
        console.print(table)

    counts = model.counts
    console.print(
        f"[bold]Total:[/bold] {counts.total}  "
        f"[bold]Pending:[/bold] {counts.pending}  "
        f"[bold]Completed:[/bold] {counts.completed}"
    )
