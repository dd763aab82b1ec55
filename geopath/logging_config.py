"""
Logging configuration for geopath.

Provides structured logging with appropriate levels and formatting.
Supports both console and file output with rotation.
"""

import logging
import sys
import time
import traceback
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


# Default format for log messages
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER_NAME = "geopath"

# Log file rotation
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure logging for geopath.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a rotating log file, written in addition
            to the console (stdout)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging(level=logging.DEBUG, log_file=Path('geopath.log'))
        >>> logger.info("Loading road network")
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler with rotation
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the ``geopath`` hierarchy

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Scanning 1200 nodes")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogTimer:
    """Context manager for timing operations with automatic logging.

    Example:
        >>> logger = get_logger(__name__)
        >>> with LogTimer(logger, "Graph build"):
        ...     graph = SegmentGraph.from_segments(segments)
        INFO - Graph build: 0.45s
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        """Initialize timer.

        Args:
            logger: Logger instance to use
            operation: Description of the operation being timed
            level: Log level for the timing message
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self):
        """Start timing."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timing and log duration."""
        if self.start_time is not None:
            self.elapsed = time.perf_counter() - self.start_time
            self.logger.log(self.level, f"{self.operation}: {self.elapsed:.3f}s")
        return False  # Don't suppress exceptions


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an exception with full traceback.

    Args:
        logger: Logger instance
        message: Context message
        exc: Exception that was caught

    Example:
        >>> try:
        ...     result = find_shortest_path(segments, start, end)
        >>> except NoPathError as e:
        ...     log_exception(logger, "Routing failed", e)
    """
    logger.error(f"{message}: {str(exc)}")
    logger.debug(
        f"Traceback:\n{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}"
    )


# Initialize default logger
_default_logger = setup_logging(level=logging.WARNING)
