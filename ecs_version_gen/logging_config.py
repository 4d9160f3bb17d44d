"""
Logging configuration for the version generator.

Centralized logging setup so every module logs through the same loguru
sink and Rich console.
"""

from loguru import logger
from rich.console import Console

VERBOSE = 'VERBOSE'

# VERBOSE sits between DEBUG=10 and INFO=20
try:
    logger.level(VERBOSE, no=15, color="<cyan>", icon="ℹ️")
except (TypeError, ValueError):
    # Level already registered
    pass

LOG_FORMAT = '<green>{time:YYYY/MM/DD HH:mm:ss}</green> | {level.icon}  - <level>{message}</level>'


def setup_logging(log_level: str = 'INFO', console: Console = None) -> None:
    """
    Set up logging configuration with a shared Rich console.

    Args:
        log_level: Logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        console: Rich Console instance for coordinated output (optional)
    """
    logger.remove()

    if console:
        logger.add(
            lambda msg: console.print(msg, end=''),
            level=log_level,
            format=LOG_FORMAT,
        )
    else:
        import sys
        logger.add(
            sys.stderr,
            level=log_level,
            format=LOG_FORMAT,
            colorize=True,
        )
