# File: robots_forge/logger.py
"""Logging for **RobotsForge**.

Every module asks for its own child of the project logger::

    from robots_forge.logger import get_logger
    logger = get_logger(__name__)          # -> "RobotsForge.serializer"

Handlers live only on the project logger, so :func:`configure` (called by the
CLI) changes level, format and destinations for all modules at once. The
initial level comes from ``ROBOTS_FORGE_LOG_LEVEL`` (``WARNING`` if unset).
"""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "RobotsForge"
LEVEL_ENV: Final[str] = "ROBOTS_FORGE_LOG_LEVEL"

_PACKAGE_PREFIX: Final[str] = "robots_forge."
_OWNED_ATTR: Final[str] = "_robots_forge_handler"

_LevelT = Union[int, str]


def default_level() -> str:
    """Level from the environment; unknown names fall back to WARNING."""
    level = os.environ.get(LEVEL_ENV, "WARNING").strip().upper()
    return level if level in logging.getLevelNamesMapping() else "WARNING"


def _own(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED_ATTR, True)
    return handler


def _drop_owned_handlers(lg: logging.Logger) -> None:
    for handler in [h for h in lg.handlers if getattr(h, _OWNED_ATTR, False)]:
        lg.removeHandler(handler)
        handler.close()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Project logger, or its child for module *name* (package prefix stripped)."""
    root = logging.getLogger(LOGGER_NAME)
    if not name:
        return root
    if name.startswith(_PACKAGE_PREFIX):
        name = name[len(_PACKAGE_PREFIX):]
    return root.getChild(name)


def configure(
    *,
    level: Optional[_LevelT] = None,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Install a stderr handler (plus a rotating file when *log_file* is given).

    Handlers added by an earlier call are replaced; foreign handlers
    (e.g. pytest's ``caplog``) are left in place.
    """
    lg = get_logger()
    lg.setLevel(level if level is not None else default_level())
    _drop_owned_handlers(lg)

    # stdout is reserved for command output
    lg.addHandler(_own(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        lg.addHandler(_own(file_handler, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: Optional[_LevelT] = None,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """CLI entry point for :func:`configure`."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = [
    "DEFAULT_FORMAT",
    "LEVEL_ENV",
    "LOGGER_NAME",
    "configure",
    "default_level",
    "get_logger",
    "init_logging",
    "logger",
]
