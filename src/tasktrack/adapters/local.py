"""Local adapter - TaskRepository backed by an in-process TaskStore."""

from __future__ import annotations

from tasktrack.models import Task, TaskUpdate
from tasktrack.repositories import TaskRepository
from tasktrack.store import TaskStore


class LocalTaskRepository(TaskRepository):
    """Task repository over a TaskStore living in this process."""

    def __init__(self, store: TaskStore | None = None):
        self.store = store if store is not None else TaskStore()

    async def list_all(self) -> list[Task]:
        return self.store.list_all()

    async def add(self, description: str) -> Task:
        return self.store.create(description)

    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        return self.store.update(
            task_id,
            description=updates.description,
            is_completed=updates.is_completed,
        )

    async def delete(self, task_id: str) -> None:
        self.store.delete(task_id)
