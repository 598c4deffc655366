"""The Rich console shared by commands, formatters and the shell."""

from functools import lru_cache

from rich.console import Console

from tasktrack.config import OutputConfig


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Return the process-wide console."""
    return Console()


def apply_output_config(output: OutputConfig) -> None:
    """Honour a profile's ``output.color`` setting."""
    get_console().no_color = not output.color
