"""View derivation - the task sequence the UI displays.

Everything here is a pure function of the current tasks and filter; the
result is recomputed on every render and never stored.
"""

from __future__ import annotations

from collections.abc import Sequence

from tasktrack.models import Task, TaskCounts, ViewFilter

EMPTY_MESSAGES = {
    ViewFilter.ALL: "No tasks yet. Add one to get started!",
    ViewFilter.PENDING: "No pending tasks!",
    ViewFilter.COMPLETED: "No completed tasks!",
}


def sort_pending_first(tasks: Sequence[Task]) -> list[Task]:
    """Pending tasks before completed ones; ``sorted`` is stable so ties keep order."""
    return sorted(tasks, key=lambda task: task.is_completed)


def matches_filter(task: Task, view_filter: ViewFilter) -> bool:
    if view_filter is ViewFilter.PENDING:
        return not task.is_completed
    if view_filter is ViewFilter.COMPLETED:
        return task.is_completed
    return True


def derive_view(
    tasks: Sequence[Task], view_filter: ViewFilter | str = ViewFilter.ALL
) -> list[Task]:
    """Sort pending-first, then keep the tasks selected by ``view_filter``."""
    view_filter = ViewFilter(view_filter)
    return [task for task in sort_pending_first(tasks) if matches_filter(task, view_filter)]


def count_tasks(tasks: Sequence[Task]) -> TaskCounts:
    completed = sum(1 for task in tasks if task.is_completed)
    return TaskCounts(
        total=len(tasks),
        pending=len(tasks) - completed,
        completed=completed,
    )


def empty_message(view_filter: ViewFilter | str) -> str:
    """Placeholder shown when the derived view is empty."""
    return EMPTY_MESSAGES[ViewFilter(view_filter)]
