"""HTTP server exposing the task store."""

from .app import create_app

__all__ = ["create_app"]
