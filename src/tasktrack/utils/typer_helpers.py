"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from tasktrack.utils.ui.console import get_console


def suggest_commands(attempted: str, known: list[str]) -> list[str]:
    """Known command names close enough to ``attempted`` to be a typo."""
    return get_close_matches(attempted, known, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped subcommand with 'did you mean'."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            suggestions = suggest_commands(args[0], list(self.commands)) if args else []
            if not suggestions:
                raise

        console = get_console()
        console.print(f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"')
        console.print()
        heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
        console.print(f"[yellow]{heading}[/yellow]")
        for suggestion in suggestions:
            console.print(f"        {suggestion}")
        raise typer.Exit(1)
