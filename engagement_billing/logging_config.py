"""
Logging setup for the command-line interface.

Log records go to stderr through rich so they never mix with invoice
output on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from engagement_billing.config.loader import LogLevel

PACKAGE_LOGGER = "engagement_billing"


def configure_logging(level: LogLevel = LogLevel.WARNING) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Safe to call repeatedly; previously installed rich handlers are replaced.

    Args:
        level: Minimum level to emit

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False
    )
    logger.addHandler(handler)
    logger.setLevel(level.value.upper())
    return logger
