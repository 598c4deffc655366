"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

import click
import pytest
import typer

from tasktrack.utils.typer_helpers import SuggestingGroup


def _group() -> SuggestingGroup:
    group = SuggestingGroup(name="tasks")
    for name in ("add", "list", "delete"):
        group.add_command(click.Command(name))
    return group


def test_known_command_resolves():
    group = _group()
    ctx = click.Context(group, info_name="tasks")

    name, command, _ = group.resolve_command(ctx, ["list"])

    assert name == "list"
    assert command.name == "list"


def test_typo_prints_suggestion_and_exits(capsys):
    group = _group()
    ctx = click.Context(group, info_name="tasks")

    with pytest.raises(typer.Exit) as exc_info:
        group.resolve_command(ctx, ["lst"])

    assert exc_info.value.exit_code == 1
    out = capsys.readouterr().out
    assert 'unknown command "lst" for "tasks"' in out
    assert "list" in out


def test_no_suggestion_reraises_usage_error():
    group = _group()
    ctx = click.Context(group, info_name="tasks")

    with pytest.raises(click.UsageError):
        group.resolve_command(ctx, ["zzzzzz"])
