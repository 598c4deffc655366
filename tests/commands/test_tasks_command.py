"""Tests for the one-shot ``tasks`` commands.

``get_client`` is patched to return clients wired to an in-process server.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from tasktrack.commands.tasks_command import app
from tasktrack.config import APIConfig, get_config_manager
from tasktrack.server import create_app
from tasktrack.services.api.client import APIClient
from tasktrack.store import TaskStore
from tasktrack.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NETWORK, ERROR_NOT_FOUND

runner = CliRunner()


@pytest.fixture()
def store():
    return TaskStore()


@pytest.fixture()
def server(store):
    """Patch get_client so every command reaches a fresh client on the same app."""
    server_app = create_app(store)

    def make_client(profile: str = "default") -> APIClient:
        return APIClient(
            APIConfig(endpoint="http://testserver/api", retry=0),
            transport=httpx.ASGITransport(app=server_app),
        )

    with patch("tasktrack.commands.tasks_command.get_client", side_effect=make_client) as mock:
        yield mock


class TestList:
    def test_json_output(self, server, store):
        task = store.create("Buy milk")

        result = runner.invoke(app, ["list", "--output", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [task.to_wire()]

    def test_profile_passed_through(self, server):
        runner.invoke(app, ["list", "--profile", "work", "-o", "json"])
        server.assert_called_once_with("work")

    def test_output_format_from_config(self, server, store):
        store.create("Buy milk")
        get_config_manager().set("output.format", "json")

        result = runner.invoke(app, ["list"])

        assert json.loads(result.stdout)[0]["description"] == "Buy milk"


class TestAdd:
    def test_creates_task(self, server, store):
        result = runner.invoke(app, ["add", "Buy milk"])

        assert result.exit_code == 0
        assert "Task created" in result.stdout
        assert [t.description for t in store.list_all()] == ["Buy milk"]

    def test_json_output(self, server, store):
        result = runner.invoke(app, ["add", "Buy milk", "-o", "json"])

        body = json.loads(result.stdout)
        assert body["description"] == "Buy milk"
        assert body["isCompleted"] is False

    def test_blank_description_exits_with_invalid_args(self, server, store):
        result = runner.invoke(app, ["add", "   "])

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Description is required" in result.stdout
        assert len(store) == 0


class TestUpdate:
    def test_mark_completed(self, server, store):
        task = store.create("Buy milk")

        result = runner.invoke(app, ["update", task.id, "--completed", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["isCompleted"] is True
        assert store.get(task.id).is_completed is True

    def test_rename(self, server, store):
        task = store.create("Buy milk")

        result = runner.invoke(app, ["update", task.id, "-d", "Buy oat milk"])

        assert result.exit_code == 0
        assert store.get(task.id).description == "Buy oat milk"

    def test_unknown_id(self, server):
        result = runner.invoke(app, ["update", "missing", "--pending"])
        assert result.exit_code == ERROR_NOT_FOUND


class TestDoneAndDelete:
    def test_done(self, server, store):
        task = store.create("Buy milk")

        result = runner.invoke(app, ["done", task.id])

        assert result.exit_code == 0
        assert "Completed: Buy milk" in result.stdout
        assert store.get(task.id).is_completed is True

    def test_delete(self, server, store):
        task = store.create("Buy milk")

        result = runner.invoke(app, ["delete", task.id])

        assert result.exit_code == 0
        assert len(store) == 0

    def test_delete_unknown(self, server):
        result = runner.invoke(app, ["delete", "missing"])

        assert result.exit_code == ERROR_NOT_FOUND
        assert "Task with id missing not found" in result.stdout


def test_unreachable_server_exits_with_network_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    def make_client(profile: str = "default") -> APIClient:
        return APIClient(
            APIConfig(endpoint="http://down.test/api", retry=0),
            transport=httpx.MockTransport(refuse),
        )

    with patch("tasktrack.commands.tasks_command.get_client", side_effect=make_client):
        result = runner.invoke(app, ["list"])

    assert result.exit_code == ERROR_NETWORK
