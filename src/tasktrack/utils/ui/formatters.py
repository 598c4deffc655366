"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from tasktrack.models import SyncMode, Task, TaskCounts, ViewFilter
from tasktrack.services.view import empty_message
from tasktrack.utils.ui.console import get_console

console = get_console()

STATUS_ICONS = {
    "open": "○",
    "completed": "✓",
}

MODE_LABELS = {
    SyncMode.LOCAL: "💾 In-Memory",
    SyncMode.REMOTE: "☁️  API Mode",
}


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col)
    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        if isinstance(value, dict):
            value = json.dumps(value)
        table.add_row(key, _cell(value))

    console.print(table)


def format_pretty(data: Any) -> None:
    """Format task payloads with icons; anything else as a table."""
    if isinstance(data, list) and all(isinstance(item, dict) and "isCompleted" in item for item in data):
        tasks = [Task.model_validate(item) for item in data]
        if not tasks:
            console.print(f"[yellow]{empty_message(ViewFilter.ALL)}[/yellow]")
        for position, task in enumerate(tasks, start=1):
            console.print(format_task_line(task, position))
    elif isinstance(data, dict) and "isCompleted" in data:
        console.print(format_task_line(Task.model_validate(data)))
    else:
        format_table(data)


def format_task_line(task: Task, position: int | None = None) -> Text:
    """One task as a line: position, status icon, description, short id."""
    line = Text()
    if position is not None:
        line.append(f"{position:>3}. ", style="dim")
    if task.is_completed:
        line.append(f"{STATUS_ICONS['completed']} ", style="green")
        line.append(task.description, style="dim strike")
    else:
        line.append(f"{STATUS_ICONS['open']} ", style="yellow")
        line.append(task.description)
    line.append(f"  #{task.id[-6:]}", style="dim")
    return line


def format_filter_bar(active: ViewFilter, counts: TaskCounts) -> Text:
    """Filter selector with per-filter totals, the active one highlighted."""
    labels = {
        ViewFilter.ALL: f"All ({counts.total})",
        ViewFilter.PENDING: f"Pending ({counts.pending})",
        ViewFilter.COMPLETED: f"Completed ({counts.completed})",
    }
    bar = Text()
    for view_filter, label in labels.items():
        style = "bold reverse" if view_filter is active else "dim"
        bar.append(f" {label} ", style=style)
        bar.append(" ")
    return bar


def render_task_list(
    *,
    tasks: list[Task],
    counts: TaskCounts,
    view_filter: ViewFilter,
    mode: SyncMode,
    last_error: str | None = None,
    loading: bool = False,
) -> None:
    """Render the whole task screen from an already derived view."""
    header = Text()
    header.append("Task Manager ", style="bold cyan")
    header.append(MODE_LABELS[mode], style="dim")
    console.print(header)

    if last_error:
        console.print(f"[black on yellow] {last_error} [/black on yellow] [dim](dismiss to hide)[/dim]")

    console.print(format_filter_bar(view_filter, counts))
    console.print(f"[bold]Tasks ({len(tasks)})[/bold]")

    if loading:
        console.print("[dim]Loading tasks...[/dim]")
    elif not tasks:
        console.print(f"[dim]{empty_message(view_filter)}[/dim]")
    else:
        for position, task in enumerate(tasks, start=1):
            console.print(format_task_line(task, position))

    console.print(
        f"[blue]{counts.total}[/blue] total  "
        f"[yellow]{counts.pending}[/yellow] pending  "
        f"[green]{counts.completed}[/green] completed"
    )


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
