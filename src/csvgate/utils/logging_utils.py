"""Structured logging utilities for the csvgate validation tools.

Log records always go to standard error (and optionally a file) so that
standard output carries nothing but the offender report.
"""

import json
import logging
import sys
import time
from datetime import UTC, datetime
from functools import wraps
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "csvgate"

# Extra record attributes understood by the formatters
CONTEXT_FIELDS = (
    "operation",
    "file_path",
    "line_number",
    "rule",
    "offenders",
    "duration",
)


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        """Initialize formatter with color configuration.

        Args:
            disable_colors: Whether to disable colored output
        """
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for terminal output."""
        if (
            not self.disable_colors
            and hasattr(sys.stderr, "isatty")
            and sys.stderr.isatty()
        ):
            color = self.COLORS.get(record.levelname, "")
            reset = self.COLORS["RESET"]
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"

        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for field_name in CONTEXT_FIELDS:
            if hasattr(record, field_name):
                log_entry[field_name] = getattr(record, field_name)

        return json.dumps(log_entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Detailed formatter with context information."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed context."""
        base_msg = super().format(record)

        context_parts = []
        if hasattr(record, "operation"):
            context_parts.append(f"op={record.operation}")
        if hasattr(record, "file_path"):
            context_parts.append(f"file={record.file_path}")
        if hasattr(record, "line_number"):
            context_parts.append(f"line={record.line_number}")
        if hasattr(record, "rule"):
            context_parts.append(f"rule={record.rule}")
        if hasattr(record, "duration"):
            context_parts.append(f"duration={record.duration:.3f}s")

        if context_parts:
            return base_msg + " [" + ", ".join(context_parts) + "]"

        return base_msg


class OperationFilter(logging.Filter):
    """Filter to add operation context to log records."""

    def __init__(self, operation: str | None = None):
        """Initialize the filter with an operation context.

        Args:
            operation: The current operation being performed
        """
        super().__init__()
        self.operation = operation

    def filter(self, record: logging.LogRecord) -> bool:
        """Add operation context to the record."""
        if self.operation and not hasattr(record, "operation"):
            record.operation = self.operation
        return True


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    operation: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path for file output
        operation: Current operation context for filtering
        log_format: Log format (console, json, detailed)
        disable_colors: Whether to disable colored output

    Returns:
        logging.Logger: Configured logger instance
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if log_format == "json":
        console_formatter: logging.Formatter = StructuredFormatter()
    elif log_format == "detailed":
        console_formatter = DetailedFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        console_formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            disable_colors=disable_colors,
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        # Files always get JSON lines
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if operation:
        operation_filter = OperationFilter(operation)
        for handler in root_logger.handlers:
            handler.addFilter(operation_filter)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_from_env(operation: str | None = None) -> logging.Logger:
    """Configure logging from CSVGATE_LOG_* environment variables.

    Args:
        operation: Current operation context (the tool name)

    Returns:
        logging.Logger: Configured logger instance
    """
    from csvgate.core.config import get_env_config

    config = get_env_config()
    return setup_logging(
        level=config["log_level"],
        log_file=config["log_file"],
        operation=operation,
        log_format=config["log_format"],
        disable_colors=config["disable_colors"],
    )


def init_default_logging(operation: str | None = None) -> None:
    """Initialize default logging configuration if not already configured."""
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        configure_from_env(operation)


def log_operation(operation: str, **context: Any) -> Any:
    """Decorator for logging operation start/end with context.

    Args:
        operation: Operation name
        **context: Additional context variables
    """

    def decorator(func: Any) -> Any:
        @wraps(func)
        def wrapper(*args: Any, **func_kwargs: Any) -> Any:
            logger = get_logger(func.__module__)
            extra = {"operation": operation, **context}

            logger.debug(f"Starting {operation}", extra=extra)
            start_time = time.monotonic()

            try:
                result = func(*args, **func_kwargs)
            except Exception as e:
                duration = time.monotonic() - start_time
                logger.debug(
                    f"Failed {operation}: {e}",
                    extra={**extra, "duration": duration},
                )
                raise

            duration = time.monotonic() - start_time
            logger.debug(
                f"Completed {operation}",
                extra={**extra, "duration": duration},
            )
            return result

        return wrapper

    return decorator
