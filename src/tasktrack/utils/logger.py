"""File logging for tasktrack.

Every module logs through ``logging.getLogger(__name__)``. Those loggers sit
under the ``tasktrack`` logger, which only gets a handler once an entry point
(a CLI command or ``tasktrack serve``) calls ``get_logger()``; importing the
package never touches the filesystem.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasktrack"
_LOG_FILE = "tasktrack.log"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the rotating log file lives for this user."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Attach the file handler to the ``tasktrack`` logger (once) and return it."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(_file_handler(log_file_path()))
        _logger = logger
    return _logger
