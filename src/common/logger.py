"""Logging utilities with rich output for the gitlog CLI.

This module combines Python's standard logging with rich's console output.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("[git] cmd: ...")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from common.env import Environment

# Diagnostics go to stderr so stdout stays clean for JSON and patch output
console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,  # git output may contain square brackets
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or Environment.log_level()).upper())

    # setup_logging already installed a rich handler on the root logger
    if any(isinstance(h, RichHandler) for h in logging.getLogger().handlers):
        return logger

    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Allow propagation so pytest caplog can capture records
    logger.propagate = True

    return logger


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once at the CLI entry point.

    Args:
        level: Default logging level; LOG_LEVEL is used when None
    """
    level = (level or Environment.log_level()).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())


def error(message: str) -> None:
    """Print an error message with a red X icon."""
    console.print(f"[red]✗[/red] {escape(message)}")
