"""One-shot task commands against the remote server.

These talk to the server directly and never fall back: a local copy would
vanish with the process. Use ``tasktrack shell`` for the offline-capable
client.
"""

import typer

from tasktrack.adapters.rest_api import RestApiTaskRepository
from tasktrack.config import get_config_manager
from tasktrack.models import TaskUpdate
from tasktrack.services.api.client import get_client
from tasktrack.utils.typer_helpers import SuggestingGroup
from tasktrack.utils.ui.console import apply_output_config
from tasktrack.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task commands (remote server)")

OUTPUT_HELP = "Output format (pretty/json/yaml/table); defaults to output.format"


def _repository(profile: str) -> RestApiTaskRepository:
    apply_output_config(get_config_manager(profile).config.output)
    return RestApiTaskRepository(get_client(profile))


def _output_format(profile: str, output: str | None) -> str:
    return output or get_config_manager(profile).config.output.format


@app.command("list")
@command_wrapper
async def list_tasks(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List all tasks in creation order."""
    repo = _repository(profile)
    try:
        tasks = await repo.list_all()
    finally:
        await repo.close()
    format_output([task.to_wire() for task in tasks], _output_format(profile, output))


@app.command("add")
@command_wrapper
async def add_task(
    description: str = typer.Argument(..., help="Task description"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Create a task."""
    repo = _repository(profile)
    try:
        task = await repo.add(description)
    finally:
        await repo.close()
    output = _output_format(profile, output)
    if output == "pretty":
        format_success(f"Task created: {task.description} (#{task.id})")
    else:
        format_output(task.to_wire(), output)


@app.command("update")
@command_wrapper
async def update_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    description: str | None = typer.Option(None, "--description", "-d", help="New description"),
    completed: bool | None = typer.Option(
        None, "--completed/--pending", help="Set completion status"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Update a task's description and/or completion status."""
    repo = _repository(profile)
    try:
        task = await repo.update(
            task_id, TaskUpdate(description=description, is_completed=completed)
        )
    finally:
        await repo.close()
    format_output(task.to_wire(), _output_format(profile, output))


@app.command("done")
@command_wrapper
async def complete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Mark a task as completed."""
    repo = _repository(profile)
    try:
        task = await repo.update(task_id, TaskUpdate(is_completed=True))
    finally:
        await repo.close()
    format_success(f"Completed: {task.description}")


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Delete a task."""
    repo = _repository(profile)
    try:
        await repo.delete(task_id)
    finally:
        await repo.close()
    format_success(f"Task {task_id} deleted")
