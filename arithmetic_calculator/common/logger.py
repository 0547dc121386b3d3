"""Shared logger for the arithmetic calculator."""
import logging
import sys


LOGGER_NAME: str = "arithmetic_calculator"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

# Diagnostics go to stderr so that stdout only ever carries computed values
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
logger.setLevel(logging.WARNING)


def configure_logging(level: str = "WARNING") -> None:
    """
    Set the level of the shared logger.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    :return: None
    """
    logger.setLevel(level.upper())
