"""
report.py - Logging Setup

INFO messages go to stdout and only in verbose mode.
WARNING and ERROR messages always go to stderr.
"""

import logging
import sys

LOGGER_NAME = "add_prefix"
LOG_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str = None) -> logging.Logger:
    """
    Returns a logger below the tool's logger

    Args:
        name (str): Optional child name (e.g. "exec")

    Returns:
        logging.Logger: Logger instance
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Install handlers on the tool's logger

    Safe to call more than once, previous handlers are replaced.

    Args:
        verbose: Enable INFO output

    Returns:
        The configured logger
    """
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)
    logger.addHandler(err_handler)

    if verbose:
        out_handler = logging.StreamHandler(sys.stdout)
        out_handler.setLevel(logging.DEBUG)
        out_handler.addFilter(_BelowWarning())
        out_handler.setFormatter(formatter)
        logger.addHandler(out_handler)

    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False
    return logger


def log(message: str) -> None:
    """Verbose-only informational message"""
    get_logger().info(message)


def warning(message: str) -> None:
    get_logger().warning(message)


def error(message: str) -> None:
    """Error message, always printed to stderr"""
    get_logger().error(message)
