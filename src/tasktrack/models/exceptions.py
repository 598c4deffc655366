"""Custom exceptions for tasktrack."""

from tasktrack.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NETWORK,
    ERROR_NOT_FOUND,
)


class TaskTrackError(Exception):
    """Base exception for all tasktrack errors."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskTrackError):
    """Raised when caller-supplied input is invalid (e.g. blank description)."""

    exit_code = ERROR_INVALID_ARGS


class NotFoundError(TaskTrackError):
    """Raised when no task has the requested id."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: str, message: str | None = None):
        super().__init__(message or f"Task with id {task_id} not found")
        self.task_id = task_id


class TransportError(TaskTrackError):
    """Raised by the client when the remote API is unreachable or misbehaves."""

    exit_code = ERROR_NETWORK
