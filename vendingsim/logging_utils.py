"""Mini README: Application-wide logging helpers for vendingsim.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-shot helper that installs the console handler.

Usage:
    Modules call ``get_logger(__name__)`` once at import time. The launcher
    calls ``configure_root_logger(settings.log_level)`` before anything logs;
    later calls only adjust the level, so reloading modules under the
    development server does not stack duplicate handlers. Log lines carry the
    thread name because web requests reach the machine from worker threads.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    if level.strip().isdigit():
        return int(level)
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Install the console handler once and set the root level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(threadName)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, installing the console handler on first use."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
