"""Loguru sink configuration for command-line use."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(level="INFO", sink=None):
    """Replace loguru's default sink with a single formatted one."""
    logger.remove()
    logger.add(sink or sys.stderr, level=level, format=LOG_FORMAT, backtrace=True, diagnose=False)
    return logger
