"""
Logging configuration for notion-specs.

All modules log through children of the ``notion_specs`` logger; this
module attaches a single stderr handler to it.
"""
import logging
import sys

LOGGER_NAME = "notion_specs"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling it again only updates the level, so repeated CLI invocations
    in one process do not stack handlers.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.

    Returns:
        logging.Logger: Configured logger instance
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
