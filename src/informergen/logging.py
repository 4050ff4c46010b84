"""Logging configuration for the informergen CLI."""

import logging
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "informergen"


def resolve_log_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> int:
    """Map CLI flags to a log level.

    Precedence is quiet > debug > verbosity: quiet gives WARNING, debug or
    ``-v`` gives DEBUG, otherwise INFO.
    """
    if quiet:
        return logging.WARNING
    if debug or verbosity >= 1:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
    debug: bool = False,
) -> Console:
    """Configure package logging based on CLI options.

    Args:
        verbosity: Number of -v flags
        quiet: Suppress non-error output
        no_color: Disable colored output
        stream: Output stream for logs (stderr when omitted)
        debug: Enable debug logging with timestamps and source paths

    Returns:
        Configured Rich console for output
    """
    level = resolve_log_level(verbosity, quiet, debug)
    console = Console(
        file=stream,
        stderr=stream is None,
        force_terminal=not no_color,
        no_color=no_color,
    )

    handler = RichHandler(
        console=console,
        show_time=debug,
        show_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)

    return console
