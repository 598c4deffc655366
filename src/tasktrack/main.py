"""Main entry point for the tasktrack CLI."""

import typer
import uvicorn

from tasktrack import __version__
from tasktrack.commands import config_command, shell_command, tasks_command
from tasktrack.config import get_config_manager
from tasktrack.server import create_app
from tasktrack.utils.logger import get_logger, log_file_path
from tasktrack.utils.typer_helpers import SuggestingGroup
from tasktrack.utils.ui.console import get_console

app = typer.Typer(
    name="tasktrack",
    cls=SuggestingGroup,
    help="In-memory task tracker: REST server and offline-capable client",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks_command.app, name="tasks", help="Task commands (remote server)")
app.add_typer(config_command.app, name="config", help="Configuration management")
app.command("shell")(shell_command.shell)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tasktrack[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Run the task server (tasks live in memory until it stops)."""
    server_config = get_config_manager(profile).config.server
    host = host or server_config.host
    port = port or server_config.port

    get_logger().info("serving on %s:%d", host, port)
    console.print(f"[green]Serving tasks on[/green] http://{host}:{port}/api/tasks")
    console.print(f"[dim]Logging to {log_file_path()}[/dim]")
    uvicorn.run(create_app(), host=host, port=port, log_level=server_config.log_level)


if __name__ == "__main__":
    app()
