"""Logging for graphwalk.

All engine loggers are children of the ``graphwalk`` logger and only ever log
at DEBUG, so nothing is printed unless the caller lowers the level::

    import logging
    from graphwalk.logging import setup_root_logger

    setup_root_logger(level=logging.DEBUG)
"""

import logging
import sys
from typing import Iterable, Iterator, Optional, TypeVar

from graphwalk.config import WALK_CONFIG

ROOT_LOGGER_NAME = "graphwalk"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

T = TypeVar("T")


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the ``graphwalk`` logger with exactly one handler.

    Calling it again replaces the previous handler, so the level, format or
    destination can be changed at any time without duplicating output.

    Args:
        level: Level of the ``graphwalk`` logger.
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.
        handler: Destination. Defaults to a stdout ``StreamHandler``.

    Returns:
        The ``graphwalk`` logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so that pytest's caplog and application handlers see records
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a graphwalk module.

    The ``graphwalk`` logger is set up on first use if nobody configured it.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
    """
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_root_logger()
    return logging.getLogger(name)


def log_progress(
    items: Iterable[T], logger: logging.Logger, label: str, unit: str = "items"
) -> Iterator[T]:
    """Pass ``items`` through, logging a DEBUG record at the progress interval.

    The interval is read from ``WALK_CONFIG.progress_log_interval`` on every
    element, so changing it affects iterators that are already running.
    Laziness is preserved: one element is pulled per ``next()`` call.

    Args:
        items: Elements produced by an engine.
        logger: Logger of the producing module.
        label: What is being produced, e.g. ``"pre_order traversal"``.
        unit: Noun for the counted elements.
    """
    count = 0
    for item in items:
        count += 1
        if WALK_CONFIG.should_log_progress(count):
            logger.debug("%s: %d %s so far", label, count, unit)
        yield item
