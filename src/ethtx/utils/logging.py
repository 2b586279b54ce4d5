"""
Structured logging for ethtx.

All library loggers hang off the ``ethtx`` namespace and stay silent
(NullHandler) until the application calls :func:`configure_logging`.

Example:
    >>> from ethtx.utils.logging import get_logger, configure_logging
    >>> configure_logging("DEBUG")
    >>> _logger = get_logger(__name__)
    >>> _logger.debug("Decoded transaction", extra={"nonce": 9})
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from ethtx.constants import LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "ethtx"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ethtx namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Optional[Union[int, str]] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the ethtx root logger.

    Args:
        level: Log level; falls back to $ETHTX_LOG_LEVEL, then WARNING
        fmt: Log record format

    Returns:
        The configured root logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    for handler in list(_root.handlers):
        if not isinstance(handler, logging.NullHandler):
            _root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    _root.addHandler(handler)
    set_level(level)
    return _root


def set_level(level: Union[int, str]) -> None:
    """Set the level of the ethtx root logger."""
    if isinstance(level, str):
        level = level.upper()
    _root.setLevel(level)


def disable_logging() -> None:
    """Silence every ethtx logger."""
    _root.setLevel(logging.CRITICAL + 1)


def enable_debug() -> None:
    """Shortcut for ``configure_logging(logging.DEBUG)``."""
    configure_logging(logging.DEBUG)
