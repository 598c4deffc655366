"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import typer

from tasktrack.models import TaskTrackError
from tasktrack.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_NETWORK,
    get_exit_code_description,
    get_exit_code_name,
)
from tasktrack.utils.logger import get_logger
from tasktrack.utils.ui.formatters import format_error, format_info


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging, coroutine support and exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if inspect.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskTrackError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                e.message,
            )
            format_error(e.message)
            if e.exit_code == ERROR_NETWORK:
                format_info(get_exit_code_description(e.exit_code))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
