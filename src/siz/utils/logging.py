"""Diagnostic logging setup.

All diagnostics go to standard error through a single handler on the ``siz``
package logger. Standard output is reserved for the report.
"""

import logging
import sys
from typing import Final, TextIO, override

PACKAGE_LOGGER: Final[str] = "siz"

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    # ANSI color codes
    COLORS: dict[str, str] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a record with a colored level name.

        Args:
            record: The log record to format

        Returns:
            Formatted log line
        """
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    color: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger with a single standard error handler.

    Calling this again replaces the previous handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        color: Color level names
        stream: Destination stream, standard error when None

    Returns:
        The configured package logger

    Example:
        >>> logger = configure_logging(log_level="DEBUG")
        >>> logger.debug("walker configured")
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = getattr(logging, log_level.upper(), logging.WARNING)
    package_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = ColoredFormatter(DEFAULT_LOG_FORMAT) if color else logging.Formatter(DEFAULT_LOG_FORMAT)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
