# pagebinder/utils/logger.py
# ============================================================
# Structured Logging Setup
# ============================================================
# All loggers hang off the "pagebinder" package logger, which
# owns the only handler: a RichHandler writing to stderr, so
# conversion progress never mixes with the CLI's summary table
# on stdout. The level comes from settings.log_level and can be
# raised at runtime with set_log_level() (the CLI's --verbose).
#
# Usage:
#   from pagebinder.utils.logger import get_logger
#   logger = get_logger(__name__)
#   logger.info("Composed page 3 of 12")
# ============================================================

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

from config.settings import settings

ROOT_LOGGER_NAME = "pagebinder"


def _parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def _root_logger() -> logging.Logger:
    """The package logger, configured on first use."""
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:
        level = _parse_level(settings.log_level)
        root.setLevel(level)

        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
            markup=True,
        )
        rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        root.addHandler(rich_handler)

        # Keep pagebinder output out of the application's root logger
        root.propagate = False

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the pagebinder package logger.

    Names outside the package (e.g. "cli.main") are nested below it, so
    every message goes through the same handler and level.

    Args:
        name: Logger name, usually __name__ of the calling module.

    Example:
        >>> logger = get_logger("pagebinder.pipeline.driver")
        >>> logger.info("Saved 4 pages")
        [10:30:45] INFO     pagebinder.pipeline.driver - Saved 4 pages
    """
    root = _root_logger()
    if name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[str, int]) -> None:
    """Change the level of every pagebinder logger at once."""
    _root_logger().setLevel(_parse_level(level))
