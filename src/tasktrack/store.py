"""In-memory task storage.

``TaskStore`` owns one collection of tasks. The server keeps the canonical
instance; the client keeps another as its local mirror. Tasks handed out are
copies, so callers can never mutate the collection behind the store's back.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from uuid import uuid4

from tasktrack.models import NotFoundError, Task, ValidationError


def validate_description(description: str | None) -> str:
    """Return ``description`` unchanged, or raise if it is empty or whitespace."""
    if description is None or not description.strip():
        raise ValidationError("Description is required")
    return description


class TaskStore:
    """Thread-safe in-memory CRUD collection of tasks.

    Every public method holds the store lock for its whole duration, so a
    mutation is indivisible with respect to any other.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {}
        # ids handed out during this process lifetime, never reissued
        self._issued: set[str] = set()
        if tasks is not None:
            self.replace_all(tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def _new_id(self) -> str:
        task_id = str(uuid4())
        while task_id in self._issued:
            task_id = str(uuid4())
        self._issued.add(task_id)
        return task_id

    def _require(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def list_all(self) -> list[Task]:
        """Return every task in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def get(self, task_id: str) -> Task:
        """Get a task by id.

        Raises:
            NotFoundError: If no task has ``task_id``
        """
        with self._lock:
            return self._require(task_id).model_copy()

    def create(self, description: str) -> Task:
        """Create a pending task and append it to the collection.

        Raises:
            ValidationError: If ``description`` is empty or whitespace
        """
        description = validate_description(description)
        with self._lock:
            task = Task(id=self._new_id(), description=description, is_completed=False)
            self._tasks[task.id] = task
            return task.model_copy()

    def update(
        self,
        task_id: str,
        description: str | None = None,
        is_completed: bool | None = None,
    ) -> Task:
        """Apply a partial update; ``None`` means leave the field unchanged.

        Raises:
            NotFoundError: If no task has ``task_id``
            ValidationError: If a supplied ``description`` is blank
        """
        if description is not None:
            validate_description(description)
        with self._lock:
            task = self._require(task_id)
            changes: dict = {}
            if description is not None:
                changes["description"] = description
            if is_completed is not None:
                changes["is_completed"] = is_completed
            if changes:
                task = task.model_copy(update=changes)
                self._tasks[task_id] = task
            return task.model_copy()

    def delete(self, task_id: str) -> None:
        """Remove a task.

        Raises:
            NotFoundError: If no task has ``task_id``
        """
        with self._lock:
            self._require(task_id)
            del self._tasks[task_id]

    # Mirror operations: fold results obtained elsewhere into this collection.

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Replace the whole collection, keeping the given order."""
        with self._lock:
            self._tasks = {task.id: task.model_copy() for task in tasks}
            self._issued.update(self._tasks)

    def merge(self, task: Task) -> None:
        """Replace the task with the same id in place, or append it."""
        with self._lock:
            self._tasks[task.id] = task.model_copy()
            self._issued.add(task.id)

    def discard(self, task_id: str) -> None:
        """Remove a task if present."""
        with self._lock:
            self._tasks.pop(task_id, None)
