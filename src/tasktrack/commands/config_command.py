"""Configuration management commands."""

import typer

from tasktrack.config import get_config_manager
from tasktrack.utils.exit_codes import ERROR_INVALID_ARGS
from tasktrack.utils.ui.console import get_console
from tasktrack.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool:
    """Convert a CLI string to the most likely config type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.endpoint)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.endpoint)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_manager(profile).set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    except ValueError as e:
        format_error(f"Invalid value for '{key}': {e}")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager(profile).reset(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
