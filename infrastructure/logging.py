"""
Logging infrastructure setup.

This module configures console logging for the normalizer CLI.
"""

import logging
import os
from typing import Optional

import coloredlogs  # type: ignore

# Get logger for this module
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

LEVEL_STYLES = {
    "debug": {"color": "cyan"},
    "info": {"color": "green"},
    "warning": {"color": "yellow"},
    "error": {"color": "red"},
    "critical": {"color": "red", "bold": True},
}


def get_log_level() -> int:
    """
    Get the logging level from the LOG_LEVEL environment variable.

    Returns:
        The logging level (defaults to logging.INFO if not set or invalid)
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_name, logging.INFO)


def setup_logger(level: Optional[int] = None) -> None:
    """
    Install colored console logging on the root logger.

    Args:
        level: Explicit logging level; LOG_LEVEL is used when omitted
    """
    log_level = level if level is not None else get_log_level()
    coloredlogs.install(level=log_level, fmt=LOG_FORMAT, level_styles=LEVEL_STYLES)
    logger.debug("log level: %s", logging.getLevelName(log_level))
