"""Tasks API endpoints."""

from typing import Any

from tasktrack.services.api.client import APIClient


class TasksAPI:
    """Tasks API client. Returns decoded JSON as received."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_tasks(self) -> list[dict]:
        """List all tasks."""
        response = await self.client.get("/tasks")
        return response.json()

    async def create_task(self, description: str) -> dict:
        """Create a new task."""
        response = await self.client.post("/tasks", json={"description": description})
        return response.json()

    async def update_task(self, task_id: str, **updates: Any) -> dict:
        """Update a task; pass ``description`` and/or ``isCompleted``."""
        response = await self.client.put(f"/tasks/{task_id}", json=updates)
        return response.json()

    async def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        await self.client.delete(f"/tasks/{task_id}")
