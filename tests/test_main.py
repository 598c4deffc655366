"""Tests for the top-level CLI application."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from tasktrack import __version__
from tasktrack.config import get_config_manager
from tasktrack.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_subcommands_registered():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("tasks", "config", "shell", "serve", "version"):
        assert name in result.stdout


def test_typo_suggests_command():
    result = runner.invoke(app, ["serv"])

    assert result.exit_code == 1
    assert "Did you mean" in result.stdout
    assert "serve" in result.stdout


class TestServe:
    def test_uses_config_defaults(self):
        with patch("tasktrack.main.uvicorn.run") as run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        run.assert_called_once()
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["port"] == 8000
        assert run.call_args.kwargs["log_level"] == "info"

    def test_options_override_config(self):
        get_config_manager("work").set("server.port", 9100)

        with patch("tasktrack.main.uvicorn.run") as run:
            runner.invoke(app, ["serve", "--profile", "work", "--host", "0.0.0.0"])

        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9100

    def test_serves_a_fresh_app(self):
        with patch("tasktrack.main.uvicorn.run") as run:
            runner.invoke(app, ["serve", "-p", "8123"])

        served = run.call_args.args[0]
        assert len(served.state.store) == 0
        assert run.call_args.kwargs["port"] == 8123
