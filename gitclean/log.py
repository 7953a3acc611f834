"""Logging setup for the gitclean logger tree."""

import logging
import sys

LOGGER_NAME = "gitclean"


class StructuredFormatter(logging.Formatter):
    """time | level | name | message, with exception text appended."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%H:%M:%S")
        base_msg = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)
        return base_msg


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the gitclean logger.

    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
