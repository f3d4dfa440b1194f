"""
Centralized logging configuration.

Drawing goes to stdout through relative cursor moves, so any stray log line on
stdout would shift the canvas. All log output is sent to stderr.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "clplot"

NOISY_LIBRARIES = [
    "markdown_it",
    "dotenv.main",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger and silence third-party loggers.

    Args:
        verbose: If True, log DEBUG and above; otherwise only WARNING and above.
        console: Console the handler writes to. Defaults to a stderr console.

    Returns:
        The configured package logger
    """
    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return package_logger
