"""Sync controller - routes task mutations to the server or the local mirror.

The controller presents one task collection to the UI. In ``local`` mode every
operation is applied to the in-process mirror. In ``remote`` mode it is sent to
the server first; a successful response is folded into the mirror, and a
failed one is recorded as a banner message and replayed against the mirror so
the user's action is never dropped.

Remote calls produce an ``OperationResult`` before anything else happens, so
the fallback is an ordinary branch on that value rather than an exception
handler. The two collections are never reconciled: switching back to remote
replaces the mirror with the server's list, discarding local-only edits.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from tasktrack.adapters.local import LocalTaskRepository
from tasktrack.models import (
    NotFoundError,
    SyncMode,
    Task,
    TaskCounts,
    TaskUpdate,
    TransportError,
    ValidationError,
    ViewFilter,
)
from tasktrack.repositories import TaskRepository
from tasktrack.services.view import count_tasks, derive_view
from tasktrack.store import TaskStore, validate_description

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load tasks. Using local storage mode."
CREATE_FAILED_MESSAGE = "Failed to add task. Switching to local storage."
UPDATE_FAILED_MESSAGE = "Failed to update task. Using local storage."
DELETE_FAILED_MESSAGE = "Failed to delete task. Using local storage."
STALE_MESSAGE = "Ignored a server response that arrived after leaving remote mode."


class Outcome(str, Enum):
    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    DISCARDED = "discarded"


@dataclass
class OperationResult:
    """What happened to one user action.

    Attributes:
        outcome: Final outcome after any fallback
        task: The created or updated task, when there is one
        message: Error text for failed outcomes
        fell_back: True when the remote attempt failed and the mirror was used
    """

    outcome: Outcome
    task: Task | None = None
    message: str | None = None
    fell_back: bool = False

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


class _Attempt(NamedTuple):
    outcome: Outcome
    payload: Any = None
    message: str | None = None


async def _attempt(call: Awaitable[Any]) -> _Attempt:
    """Await a repository call and turn its outcome into a value."""
    try:
        return _Attempt(Outcome.SUCCESS, await call)
    except ValidationError as e:
        return _Attempt(Outcome.VALIDATION_ERROR, message=e.message)
    except NotFoundError as e:
        return _Attempt(Outcome.NOT_FOUND, message=e.message)
    except TransportError as e:
        return _Attempt(Outcome.TRANSPORT_ERROR, message=e.message)


class SyncController:
    """Client-side owner of the displayed task collection.

    Args:
        remote: Repository reaching the task server
        mode: Initial routing mode; call ``start()`` to load when remote
        view_filter: Initial view filter
        mirror: Store backing the local mirror (a fresh one by default)
    """

    def __init__(
        self,
        remote: TaskRepository,
        *,
        mode: SyncMode | str = SyncMode.LOCAL,
        view_filter: ViewFilter | str = ViewFilter.ALL,
        mirror: TaskStore | None = None,
    ):
        self.remote = remote
        self.mirror = mirror if mirror is not None else TaskStore()
        self.local = LocalTaskRepository(self.mirror)
        self.view_filter = ViewFilter(view_filter)
        self.last_error: str | None = None
        self.loading = False
        self._mode = SyncMode(mode)
        # bumped on every mode change; responses from an older epoch are stale
        self._epoch = 0
        self._lock = asyncio.Lock()

    @property
    def mode(self) -> SyncMode:
        return self._mode

    @property
    def tasks(self) -> list[Task]:
        """The displayed collection, in insertion order."""
        return self.mirror.list_all()

    def view(self) -> list[Task]:
        return derive_view(self.tasks, self.view_filter)

    def counts(self) -> TaskCounts:
        return count_tasks(self.tasks)

    def set_filter(self, view_filter: ViewFilter | str) -> None:
        self.view_filter = ViewFilter(view_filter)

    def dismiss_error(self) -> None:
        self.last_error = None

    async def start(self) -> None:
        """Load the server's tasks if the controller starts in remote mode."""
        if self._mode is SyncMode.REMOTE:
            await self.refresh()

    async def close(self) -> None:
        await self.remote.close()

    async def set_mode(self, mode: SyncMode | str) -> None:
        """Switch routing mode.

        Entering remote mode reloads the whole collection from the server.
        Entering local mode keeps the current tasks as they are.
        """
        mode = SyncMode(mode)
        if mode is self._mode:
            return
        self._mode = mode
        self._epoch += 1
        logger.info("mode switched to %s", mode.value)
        if mode is SyncMode.REMOTE:
            await self.refresh()

    async def refresh(self) -> OperationResult:
        """Replace the displayed tasks with the server's collection."""
        async with self._lock:
            epoch = self._epoch
            self.loading = True
            try:
                attempt = await _attempt(self.remote.list_all())
            finally:
                self.loading = False

            if epoch != self._epoch:
                logger.info("discarding stale task list")
                return OperationResult(Outcome.DISCARDED, message=STALE_MESSAGE)
            if attempt.outcome is Outcome.SUCCESS:
                self.mirror.replace_all(attempt.payload)
                self.last_error = None
                logger.info("loaded %d tasks from server", len(attempt.payload))
                return OperationResult(Outcome.SUCCESS)

            logger.warning("task list refresh failed: %s", attempt.message)
            self.last_error = LOAD_FAILED_MESSAGE
            return OperationResult(attempt.outcome, message=attempt.message)

    async def create(self, description: str) -> OperationResult:
        """Create a task."""
        async with self._lock:
            try:
                validate_description(description)
            except ValidationError as e:
                return OperationResult(Outcome.VALIDATION_ERROR, message=e.message)

            if self._mode is SyncMode.LOCAL:
                return await self._apply_local(self.local.add(description))

            epoch = self._epoch
            attempt = await _attempt(self.remote.add(description))
            return await self._resolve(
                epoch,
                attempt,
                on_success=self.mirror.merge,
                fallback=lambda: self.local.add(description),
                failure_message=CREATE_FAILED_MESSAGE,
            )

    async def update(
        self,
        task_id: str,
        *,
        description: str | None = None,
        is_completed: bool | None = None,
    ) -> OperationResult:
        """Apply a partial update; ``None`` leaves a field unchanged."""
        async with self._lock:
            return await self._update_locked(task_id, description, is_completed)

    async def toggle(self, task_id: str) -> OperationResult:
        """Flip the completion status of a displayed task.

        The current status is read once earlier actions have finished, so
        queued toggles alternate.
        """
        async with self._lock:
            try:
                current = self.mirror.get(task_id)
            except NotFoundError as e:
                return OperationResult(Outcome.NOT_FOUND, message=e.message)
            return await self._update_locked(
                task_id, None, not current.is_completed
            )

    async def _update_locked(
        self,
        task_id: str,
        description: str | None,
        is_completed: bool | None,
    ) -> OperationResult:
        try:
            updates = TaskUpdate(
                description=validate_description(description)
                if description is not None
                else None,
                is_completed=is_completed,
            )
        except ValidationError as e:
            return OperationResult(Outcome.VALIDATION_ERROR, message=e.message)

        if self._mode is SyncMode.LOCAL:
            return await self._apply_local(self.local.update(task_id, updates))

        epoch = self._epoch
        attempt = await _attempt(self.remote.update(task_id, updates))
        return await self._resolve(
            epoch,
            attempt,
            on_success=self.mirror.merge,
            fallback=lambda: self.local.update(task_id, updates),
            failure_message=UPDATE_FAILED_MESSAGE,
        )

    async def delete(self, task_id: str) -> OperationResult:
        """Delete a task."""
        async with self._lock:
            if self._mode is SyncMode.LOCAL:
                return await self._apply_local(self.local.delete(task_id))

            epoch = self._epoch
            attempt = await _attempt(self.remote.delete(task_id))
            return await self._resolve(
                epoch,
                attempt,
                on_success=lambda _: self.mirror.discard(task_id),
                fallback=lambda: self.local.delete(task_id),
                failure_message=DELETE_FAILED_MESSAGE,
            )

    async def _apply_local(self, call: Awaitable[Task | None]) -> OperationResult:
        attempt = await _attempt(call)
        return OperationResult(attempt.outcome, task=attempt.payload, message=attempt.message)

    async def _resolve(
        self,
        epoch: int,
        attempt: _Attempt,
        *,
        on_success: Callable[[Any], None],
        fallback: Callable[[], Awaitable[Task | None]],
        failure_message: str,
    ) -> OperationResult:
        """Fold a remote attempt into the mirror, or fall back to the mirror."""
        if epoch != self._epoch:
            logger.info("discarding stale %s response", attempt.outcome.value)
            return OperationResult(Outcome.DISCARDED, message=STALE_MESSAGE)

        if attempt.outcome is Outcome.SUCCESS:
            on_success(attempt.payload)
            self.last_error = None
            return OperationResult(Outcome.SUCCESS, task=attempt.payload)

        if attempt.outcome is Outcome.VALIDATION_ERROR:
            # local mode applies the same rule, so a fallback would fail too
            return OperationResult(Outcome.VALIDATION_ERROR, message=attempt.message)

        logger.warning("remote %s, falling back to local: %s", attempt.outcome.value, attempt.message)
        self.last_error = failure_message
        result = await self._apply_local(fallback())
        result.fell_back = True
        return result
