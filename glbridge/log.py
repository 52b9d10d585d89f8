"""Package logging helpers."""

from __future__ import annotations

import logging
from typing import Optional, Union

from glbridge.config import get_config

ROOT_LOGGER_NAME = "glbridge"

_HANDLER: Optional[logging.Handler] = None

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{area}")


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Apply `level` (or GLBRIDGE_LOG_LEVEL) to the package logger and attach
    a single console handler. Calling it again only updates the level.

    Raises ValueError for a level name that is not a standard level
    """
    global _HANDLER

    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        name = level.strip().upper()
        if name not in _LEVELS:
            raise ValueError(f"Unknown log level {level!r}")
        level = _LEVELS[name]

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(_HANDLER)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
