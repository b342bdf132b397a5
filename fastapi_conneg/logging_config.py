"""
Loguru logging configuration.

The package logs through loguru but stays disabled until the application
calls ``configure_logging``.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(environment: str = "development", level: str = "INFO") -> None:
    """
    Configure Loguru for the application.

    Args:
        environment: "development" for console, anything else for JSON.
        level: Minimum level written to stderr.
    """
    logger.remove()
    logger.enable("fastapi_conneg")

    if environment == "development":
        logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)
    else:
        logger.add(sys.stderr, format="{message}", level=level, serialize=True)
