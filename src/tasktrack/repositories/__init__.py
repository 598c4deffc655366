"""Repository interfaces for tasktrack.

Implementations (Adapters) are in:
- tasktrack.adapters.local (in-process TaskStore)
- tasktrack.adapters.rest_api (remote API)
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
