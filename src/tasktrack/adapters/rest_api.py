"""REST API adapter - TaskRepository implementation using the tasktrack REST API.

Wraps the API client and turns every failure into the shared error taxonomy:
a 400 becomes ``ValidationError``, a 404 becomes ``NotFoundError`` and
anything else (network errors, other statuses, undecodable bodies) becomes
``TransportError``.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TypeVar

import httpx
import pydantic

from tasktrack.models import (
    NotFoundError,
    Task,
    TaskUpdate,
    TransportError,
    ValidationError,
)
from tasktrack.repositories import TaskRepository
from tasktrack.services.api.client import APIClient
from tasktrack.services.api.tasks import TasksAPI

T = TypeVar("T")


def _error_message(response: httpx.Response) -> str | None:
    """Extract ``message`` from an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class RestApiTaskRepository(TaskRepository):
    """Task repository implementation using the REST API."""

    def __init__(self, client: APIClient | None = None):
        self._client = client
        self._tasks_api: TasksAPI | None = None

    @property
    def client(self) -> APIClient:
        """Get or create the API client."""
        if self._client is None:
            self._client = APIClient()
        return self._client

    @property
    def tasks_api(self) -> TasksAPI:
        """Get or create TasksAPI instance."""
        if self._tasks_api is None:
            self._tasks_api = TasksAPI(self.client)
        return self._tasks_api

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.close()

    async def _call(self, call: Awaitable[T], task_id: str | None = None) -> T:
        try:
            return await call
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _error_message(e.response)
            if status == 400:
                raise ValidationError(message or "Invalid request") from e
            if status == 404 and task_id is not None:
                raise NotFoundError(task_id, message) from e
            raise TransportError(f"Server responded with status {status}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach the task server: {e}") from e
        except ValueError as e:
            # json decoding errors subclass ValueError
            raise TransportError(f"Malformed response from the task server: {e}") from e

    @staticmethod
    def _to_task(data: object) -> Task:
        try:
            return Task.model_validate(data)
        except pydantic.ValidationError as e:
            raise TransportError(f"Unexpected task payload: {e}") from e

    async def list_all(self) -> list[Task]:
        """List all tasks."""
        data = await self._call(self.tasks_api.list_tasks())
        if not isinstance(data, list):
            raise TransportError("Unexpected task list payload")
        return [self._to_task(item) for item in data]

    async def add(self, description: str) -> Task:
        """Create a new task."""
        data = await self._call(self.tasks_api.create_task(description))
        return self._to_task(data)

    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Update a task with only the supplied fields."""
        data = await self._call(
            self.tasks_api.update_task(task_id, **updates.to_wire()),
            task_id=task_id,
        )
        return self._to_task(data)

    async def delete(self, task_id: str) -> None:
        """Delete a task."""
        await self._call(self.tasks_api.delete_task(task_id), task_id=task_id)
