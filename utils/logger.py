"""
utils/logger.py
---------------
Logging setup for the data layer.

Modules obtain loggers with `get_logger(__name__)`; the first call
installs a single stdout handler on the root logger at `LOG_LEVEL`.
Entry points may call `configure_logging()` earlier to pick another
level, e.g. DEBUG to see every SQL statement with its bound parameters.
"""

import logging
import sys
from typing import Optional, TextIO, Union

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str, None] = None, stream: Optional[TextIO] = None) -> None:
    """
    Install (or re-level) the shared root handler.

    Args:
        level: Level name or number; defaults to ``LOG_LEVEL`` from the environment.
        stream: Output stream; defaults to stdout.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(stream or sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(_handler)
    elif stream is not None:
        _handler.setStream(stream)
    root.setLevel(_resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures the root handler on first use."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
