"""nestodo logging configuration.

All modules log through the standard library (`logging.getLogger(__name__)`)
under the `nestodo` namespace. The terminal app owns stdout, so records go to
a rotating log file (default: `~/.nestodo/nestodo.log`).
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from nestodo.constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES

LOGGER_NAME = "nestodo"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, log_path: Optional[Path] = None) -> logging.Logger:
    """Configure nestodo logging.

    Args:
        level: Optional override for `NESTODO_LOG_LEVEL`.
        log_path: Optional override for the configured log file.

    Returns:
        The configured package logger.
    """
    from nestodo.config import config

    if level:
        os.environ["NESTODO_LOG_LEVEL"] = level
    resolved_level = (os.getenv("NESTODO_LOG_LEVEL") or config.log_level).upper()
    path = Path(log_path or config.log_path).expanduser()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved_level)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
