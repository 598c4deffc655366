"""Client-side view and mode selectors."""

from dataclasses import dataclass
from enum import Enum


class SyncMode(str, Enum):
    """Where the client routes task mutations."""

    REMOTE = "remote"
    LOCAL = "local"


class ViewFilter(str, Enum):
    """Which tasks the derived view keeps."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TaskCounts:
    """Totals shown in the stats footer and on the filter labels."""

    total: int
    pending: int
    completed: int
