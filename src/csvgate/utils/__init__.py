"""Utilities module for csvgate."""

from .file_utils import (
    atomic_replace,
    default_cleaned_path,
    is_same_file,
    open_output,
    validate_input_path,
)
from .logging_utils import get_logger, init_default_logging, log_operation, setup_logging
from .rich_utils import get_console, install_rich_tracebacks

__all__ = [
    # File utilities
    "atomic_replace",
    "default_cleaned_path",
    "is_same_file",
    "open_output",
    "validate_input_path",
    # Logging utilities
    "get_logger",
    "init_default_logging",
    "log_operation",
    "setup_logging",
    # Rich utilities
    "get_console",
    "install_rich_tracebacks",
]
