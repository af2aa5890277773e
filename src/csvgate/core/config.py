"""Configuration defaults and environment handling for csvgate."""

import codecs
import os
from typing import Any

import dotenv

from csvgate.core.exceptions import UsageError

# Defaults shared by both tools
DEFAULT_DELIMITER = ","
DEFAULT_MAX_LENGTH = 200
DEFAULT_ENCODING = "utf-8"
TRUNCATION_MARKER = "... [truncated]"

# Number of non-blank lines sampled for column count detection
DETECTION_SAMPLE_SIZE = 3

# Appended to the input name (minus a literal ".csv") for --remove output
CSV_SUFFIX = ".csv"
CLEANED_SUFFIX = ".cleaned.csv"

ENV_PREFIX = "CSVGATE_"


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def validate_encoding(name: str) -> str:
    """Validate that an encoding name is usable for line-oriented input.

    Lines are split on the single byte "\\n", so only codecs that encode a
    newline as exactly that byte are accepted (UTF-16 and UTF-32 are not).

    Args:
        name: Encoding name

    Returns:
        str: The canonical codec name

    Raises:
        UsageError: If the encoding is unknown or does not encode "\\n" as
            a single newline byte
    """
    try:
        codec_name = codecs.lookup(name).name
        newline = "\n".encode(codec_name)
    except (LookupError, UnicodeError) as e:
        raise UsageError(
            f"Unknown encoding: {name}", option="--encoding"
        ) from e

    if newline != b"\n":
        raise UsageError(
            f"Unsupported encoding: {name}",
            option="--encoding",
            details='lines must end in a single "\\n" byte',
        )
    return codec_name


def get_env_config() -> dict[str, Any]:
    """Get environment-derived defaults.

    Environment variables (optionally from a local .env file):
        CSVGATE_ENCODING: Default input encoding (default: utf-8)
        CSVGATE_LOG_LEVEL: Log level (default: WARNING)
        CSVGATE_LOG_FILE: Log file path (optional)
        CSVGATE_LOG_FORMAT: console, json or detailed (default: console)
        CSVGATE_LOG_DISABLE_COLORS: Disable colored log output (default: false)

    Returns:
        Dict[str, Any]: Configuration dictionary
    """
    check_env_file()

    return {
        "encoding": os.getenv(f"{ENV_PREFIX}ENCODING", DEFAULT_ENCODING),
        "log_level": os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
        "log_file": os.getenv(f"{ENV_PREFIX}LOG_FILE"),
        "log_format": os.getenv(f"{ENV_PREFIX}LOG_FORMAT", "console"),
        "disable_colors": os.getenv(
            f"{ENV_PREFIX}LOG_DISABLE_COLORS", "false"
        ).lower()
        == "true",
    }


def get_default_encoding() -> str:
    """Get the default input encoding for the current environment."""
    return str(get_env_config()["encoding"])
