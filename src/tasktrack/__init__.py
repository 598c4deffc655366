"""tasktrack - in-memory task tracker with a remote/local client."""

__version__ = "0.1.0"
