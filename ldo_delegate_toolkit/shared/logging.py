"""
Lightweight logging utilities for the LDO Delegate Toolkit.

Provides a consistent logger with a simple console handler and optional
log-level override via the LDO_LOG_LEVEL environment variable.
"""

import logging
import os
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ROOT_LOGGER = "ldo_delegate_toolkit"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root.addHandler(handler)

        level_str = os.getenv("LDO_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)
        root.setLevel(level)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger under the package root logger.

    The first time a logger is requested, a StreamHandler is attached to the
    ``ldo_delegate_toolkit`` logger with a plain-text formatter. Child loggers
    propagate to it, so a single level change affects the whole package.

    Log level can be overridden with the LDO_LOG_LEVEL environment variable.
    """
    root = _configure_root()
    if not name or name == _ROOT_LOGGER:
        return root
    if not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Override the package log level (used by ``--quiet``)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _configure_root().setLevel(level)
