"""tasktrack domain models.

Pydantic models for the task entity and its request bodies, plus the
client-side selectors and the exception taxonomy shared by server and client.
"""

from .exceptions import (
    NotFoundError,
    TaskTrackError,
    TransportError,
    ValidationError,
)
from .task import Task, TaskCreate, TaskUpdate
from .view import SyncMode, TaskCounts, ViewFilter

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    # Client selectors
    "SyncMode",
    "ViewFilter",
    "TaskCounts",
    # Errors
    "TaskTrackError",
    "ValidationError",
    "NotFoundError",
    "TransportError",
]
