"""File operation utilities for the csvgate validation tools."""

import os
import shutil
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from csvgate.core.config import CLEANED_SUFFIX, CSV_SUFFIX
from csvgate.core.exceptions import InputError, WriteError
from csvgate.utils.logging_utils import get_logger

logger = get_logger(__name__)


def validate_input_path(file_path: str | Path) -> Path:
    """Validate that a path names an existing, readable regular file.

    Args:
        file_path: Path to validate

    Returns:
        Path object if valid

    Raises:
        InputError: If the path is missing, not a file, or unreadable
    """
    path = Path(file_path)

    if not path.exists():
        raise InputError("File not found", file_path=str(path))
    if not path.is_file():
        raise InputError("Path is not a regular file", file_path=str(path))
    if not os.access(path, os.R_OK):
        raise InputError("Permission denied reading file", file_path=str(path))

    return path


def is_same_file(first: str | Path, second: str | Path) -> bool:
    """Check whether two paths refer to the same file on disk.

    A path that does not exist yet never matches.
    """
    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def default_cleaned_path(input_path: str | Path) -> Path:
    """Derive the default cleaned output path for an input file.

    A literal, case-sensitive ".csv" suffix is replaced by ".cleaned.csv";
    any other name gets ".cleaned.csv" appended to its full name.

    Examples:
        data.csv -> data.cleaned.csv
        data.txt -> data.txt.cleaned.csv
        data.CSV -> data.CSV.cleaned.csv
    """
    path = Path(input_path)
    name = path.name
    if name.endswith(CSV_SUFFIX) and len(name) > len(CSV_SUFFIX):
        name = name[: -len(CSV_SUFFIX)]
    return path.with_name(name + CLEANED_SUFFIX)


@contextmanager
def open_output(file_path: str | Path) -> Generator[BinaryIO, None, None]:
    """Context manager opening a cleaned-output file for binary writing.

    The file is created or truncated up front so that an unwritable
    destination fails before any classification output is produced.

    Args:
        file_path: Destination path

    Yields:
        Binary file object for writing

    Raises:
        WriteError: If the file cannot be created or written
    """
    path = Path(file_path)
    try:
        handle = open(path, "wb")
    except OSError as e:
        raise WriteError(
            "Cannot create output file",
            file_path=str(path),
            operation="create",
            details=e.strerror or str(e),
        ) from e

    try:
        with handle:
            yield handle
            handle.flush()
    except BrokenPipeError:
        # Raised by the report stream, not by this file
        raise
    except OSError as e:
        raise WriteError(
            "Cannot write output file",
            file_path=str(path),
            operation="write",
            details=e.strerror or str(e),
        ) from e


def _discard_temp_file(temp_path: Path) -> None:
    """Remove a temporary file left over from a failed replacement."""
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(
            f"Could not remove temporary file {temp_path}: {e}",
            extra={"file_path": str(temp_path)},
        )


@contextmanager
def atomic_replace(target_path: str | Path) -> Generator[BinaryIO, None, None]:
    """Context manager that atomically replaces a file with new content.

    A temporary file is created exclusively in the target's directory, so
    the final rename never crosses a filesystem boundary. Only after the
    body completes without error is the temporary file given the target's
    permission bits, synced and renamed over the target. On any failure the
    temporary file is removed and the target is left untouched.

    Args:
        target_path: File to replace

    Yields:
        Binary file object for the replacement content

    Raises:
        WriteError: If the temporary file cannot be created, written or renamed
    """
    target = Path(target_path)
    directory = target.parent

    try:
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=directory
        )
    except OSError as e:
        raise WriteError(
            "Cannot create temporary file",
            file_path=str(directory),
            operation="create",
            details=e.strerror or str(e),
        ) from e

    temp_path = Path(temp_name)
    logger.debug(
        f"Writing replacement for {target} to {temp_path}",
        extra={"file_path": str(target)},
    )

    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(target, temp_path)
        os.replace(temp_path, target)
    except BrokenPipeError:
        _discard_temp_file(temp_path)
        raise
    except OSError as e:
        _discard_temp_file(temp_path)
        raise WriteError(
            "Cannot replace input file",
            file_path=str(target),
            operation="replace",
            details=e.strerror or str(e),
        ) from e
    except BaseException:
        _discard_temp_file(temp_path)
        raise
