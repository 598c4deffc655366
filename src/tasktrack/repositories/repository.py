"""Repository abstraction layer for tasktrack.

Defines the interface the sync controller uses to reach a task collection,
independent of whether it lives in this process or behind the REST API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tasktrack.models import Task, TaskUpdate


class TaskRepository(ABC):
    """Abstract base class for task CRUD operations.

    Implementations raise ``ValidationError`` and ``NotFoundError`` for bad
    input and unknown ids; remote implementations additionally raise
    ``TransportError``.
    """

    @abstractmethod
    async def list_all(self) -> list[Task]:
        """List every task in insertion order."""
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def add(self, description: str) -> Task:
        """Create a new task.

        Args:
            description: Task text, must not be blank

        Returns:
            Created Task object with generated ID
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Apply a partial update to a task.

        Args:
            task_id: Unique identifier for the task
            updates: Fields to change; unset fields are left alone

        Returns:
            Updated Task object
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Delete a task.

        Args:
            task_id: Unique identifier for the task
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    async def close(self) -> None:
        """Release any resources held by the adapter."""

