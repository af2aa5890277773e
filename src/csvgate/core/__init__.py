"""Core configuration and exceptions for csvgate."""

from csvgate.core.config import (
    check_env_file,
    get_default_encoding,
    get_env_config,
    validate_encoding,
)
from csvgate.core.exceptions import (
    CsvGateError,
    DetectionError,
    InputError,
    UsageError,
    WriteError,
)

__all__ = [
    "check_env_file",
    "get_env_config",
    "get_default_encoding",
    "validate_encoding",
    "CsvGateError",
    "UsageError",
    "InputError",
    "DetectionError",
    "WriteError",
]
