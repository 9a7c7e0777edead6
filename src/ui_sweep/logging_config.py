"""
Logging configuration for UI Sweep.

Logs go to stderr through rich so they never mix with the report on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for ui_sweep
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
    )

    logger = logging.getLogger("ui_sweep")
    # Repeated runs in one process (tests, API callers) must not stack handlers
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'ui_sweep.scanning.walker')
              If None, returns the root ui_sweep logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("ui_sweep")

    if not name.startswith("ui_sweep"):
        name = f"ui_sweep.{name}"

    return logging.getLogger(name)
