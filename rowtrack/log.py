"""Logging setup for rowtrack.

The TUI owns the terminal, so log output goes to a debug file instead of
stdout. Without --debug nothing is written.
"""

import logging
from pathlib import Path

DEBUG_LOG_FILE = Path("rowtrack-debug.log")
ROOT_LOGGER_NAME = "rowtrack"


def setup_logging(debug: bool = False, log_file: Path = DEBUG_LOG_FILE) -> logging.Logger:
    """Configure the rowtrack logger.

    Args:
        debug: Write DEBUG and above to log_file when True
        log_file: Path of the debug log, truncated at startup

    Returns:
        The configured root rowtrack logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = False

    if not debug:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Clear the debug log at startup
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)

    logger.debug("=== rowtrack Debug Log ===")
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger in the rowtrack hierarchy.

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
