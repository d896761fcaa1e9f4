"""Logging helpers for the application.

Provides a convenience `get_logger` factory that attaches a stream handler
and, when enabled in settings, a rotating file handler, so every module logs
with the same format.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from core.config import get_settings

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_handlers: List[logging.Handler] = []


def _build_handlers() -> List[logging.Handler]:
    settings = get_settings()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(_formatter)
    handlers: List[logging.Handler] = [stream_handler]

    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.log_dir, "app.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
        )
        file_handler.setFormatter(_formatter)
        handlers.append(file_handler)
    return handlers


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger with the shared handlers.

    Handlers are created once and reused; calling this repeatedly for the
    same name does not add duplicate handlers.
    """
    if not _handlers:
        _handlers.extend(_build_handlers())

    logger = logging.getLogger(name)
    if not logger.handlers:
        if level is None:
            level = logging.getLevelName(get_settings().log_level)
            if not isinstance(level, int):
                level = logging.INFO
        logger.setLevel(level)
        for handler in _handlers:
            logger.addHandler(handler)
        logger.propagate = False
    return logger
