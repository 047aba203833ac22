"""
Logging configuration for the Microsoft Graph identity client.

Configures the ``entra_graph`` package logger. Client classes default to
``logging.getLogger(__name__)``, so their records reach the handlers set up
here. Bearer tokens are masked before any record is written.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "entra_graph"

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE)


class TokenRedactingFilter(logging.Filter):
    """Masks bearer tokens in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _BEARER_RE.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the package logger.

    Args:
        name: Logger name; defaults to the package logger so module loggers
              such as ``entra_graph.api.client`` share its handlers
        log_file: Path to a log file; no file handler when None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    redactor = TokenRedactingFilter()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    console_handler.addFilter(redactor)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        file_handler.addFilter(redactor)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """Logs the start, duration and outcome of one Graph operation."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Operation name, e.g. 'list users'
        """
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            # Graph errors carry the request-id support needs
            request_id = getattr(exc_val, "request_id", None)
            suffix = f" (request-id {request_id})" if request_id else ""
            self.logger.error(
                f"Failed {self.operation} after {duration:.2f}s: {exc_val}{suffix}",
                exc_info=True
            )
            return False

        self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return True
