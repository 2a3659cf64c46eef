# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Loggers for confstash.

Modules log to children of the ``confstash`` logger, which carries a
``NullHandler``: an embedding application sees nothing until it configures
logging itself or calls :func:`add_stderr_logger`. Errors are raised, never
logged; records here trace reads, staging and renames at debug level.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "confstash"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (defaults to 'confstash'); module names such as
            'confstash.writer' give children of the package logger

    Returns:
        Logger instance
    """
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)


# Package logger instance
logger = get_logger()
logger.addHandler(logging.NullHandler())


def add_stderr_logger(level: int | str = logging.DEBUG) -> logging.Handler:
    """Send confstash records to stderr through a rich handler.

    Only the ``confstash`` logger is touched, so the host application's own
    logging setup stays as it is.

    Args:
        level: Logging level name or number, DEBUG by default

    Returns:
        The installed handler, for ``logger.removeHandler`` once done
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.DEBUG)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        enable_link_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", LOGGER_NAME)
    return handler
