"""Adapters implementing the repository interfaces."""

from .local import LocalTaskRepository
from .rest_api import RestApiTaskRepository

__all__ = ["LocalTaskRepository", "RestApiTaskRepository"]
