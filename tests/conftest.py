"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/API state.
"""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import patch

import httpx
import pytest

from tasktrack.config import APIConfig
from tasktrack.models import Task, TaskUpdate, TransportError
from tasktrack.repositories import TaskRepository
from tasktrack.server import create_app
from tasktrack.services.api.client import APIClient
from tasktrack.store import TaskStore


# ---------------------------------------------------------------------------
# Config and log isolation
# ---------------------------------------------------------------------------


def _reset_singletons() -> None:
    import tasktrack.config as config_mod
    import tasktrack.utils.logger as logger_mod

    config_mod._config_manager = None
    logger_mod._logger = None
    app_logger = logging.getLogger("tasktrack")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* so config and log files never leak."""
    _reset_singletons()
    with patch("tasktrack.config.user_config_dir", return_value=str(tmp_path / "config")):
        with patch("tasktrack.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
            yield tmp_path
    _reset_singletons()


# ---------------------------------------------------------------------------
# Remote doubles
# ---------------------------------------------------------------------------


class FakeRemoteRepository(TaskRepository):
    """Remote repository double backed by a TaskStore.

    ``fail`` makes every call raise TransportError. ``gate`` holds calls in
    flight until it is set; ``entered`` is set as soon as a call starts.
    """

    def __init__(self, store: TaskStore | None = None):
        self.store = store if store is not None else TaskStore()
        self.fail = False
        self.gate: asyncio.Event | None = None
        self.entered = asyncio.Event()
        self.calls: list[str] = []
        self.closed = False

    async def _enter(self, name: str) -> None:
        self.calls.append(name)
        self.entered.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise TransportError("connection refused")

    async def list_all(self) -> list[Task]:
        await self._enter("list_all")
        return self.store.list_all()

    async def add(self, description: str) -> Task:
        await self._enter("add")
        return self.store.create(description)

    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        await self._enter("update")
        return self.store.update(
            task_id, description=updates.description, is_completed=updates.is_completed
        )

    async def delete(self, task_id: str) -> None:
        await self._enter("delete")
        self.store.delete(task_id)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def remote():
    return FakeRemoteRepository()


@pytest.fixture()
def server_store():
    return TaskStore()


@pytest.fixture()
def asgi_client(server_store):
    """APIClient wired to an in-process server through ASGITransport."""
    app = create_app(server_store)
    return APIClient(
        APIConfig(endpoint="http://testserver/api", retry=0),
        transport=httpx.ASGITransport(app=app),
    )
