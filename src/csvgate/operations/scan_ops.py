"""Single-pass classify, report and clean loop shared by every tool."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, TextIO

from ..core.config import TRUNCATION_MARKER
from ..core.exceptions import InputError
from ..models.config import RunConfig
from ..models.result import ScanResult
from ..models.row import Row, Verdict
from ..models.rules import ColumnCountRule, FirstColumnIntegerRule, ValidationRule
from ..utils.file_utils import atomic_replace, open_output
from ..utils.logging_utils import get_logger, log_operation
from .detect_ops import detect_required_columns

logger = get_logger(__name__)


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters, marking the cut.

    Args:
        text: Line text
        max_length: Maximum number of characters kept

    Returns:
        str: The text unchanged if short enough, otherwise its first
            max_length characters followed by the truncation marker
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def format_offender(row: Row, max_length: int) -> str:
    """Format a report entry for an offending row."""
    return f"LINE {row.number}: {truncate_text(row.text, max_length)}"


def iter_rows(
    input_path: Path, delimiter: str, encoding: str = "utf-8"
) -> Iterator[Row]:
    """Yield the rows of a file one at a time, in order.

    Lines are split on "\\n" only; each row keeps its exact bytes.

    Raises:
        InputError: If the file cannot be opened or read
    """
    try:
        handle = open(input_path, "rb")
    except OSError as e:
        raise InputError(
            "Cannot read input file", file_path=str(input_path), details=str(e)
        ) from e

    with handle:
        number = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as e:
                raise InputError(
                    "Cannot read input file",
                    file_path=str(input_path),
                    details=str(e),
                ) from e
            if not raw:
                break
            number += 1
            yield Row.from_raw(number, raw, delimiter, encoding)


@contextmanager
def cleaned_destination(config: RunConfig) -> Generator[BinaryIO | None, None, None]:
    """Open the destination for conforming rows, if cleaning was requested.

    Yields None when only reporting.
    """
    if config.inplace:
        with atomic_replace(config.input_path) as handle:
            yield handle
    elif config.output_path is not None:
        with open_output(config.output_path) as handle:
            yield handle
    else:
        yield None


@log_operation("scan")
def scan_file(config: RunConfig, rule: ValidationRule, report: TextIO) -> ScanResult:
    """Classify every line of the input, report offenders, and clean.

    Each row gets exactly one verdict; the same verdict decides whether it
    is reported and whether it is copied, so the reported offenders and
    the rows missing from the cleaned copy are always the same set.

    Args:
        config: Run configuration
        rule: Rule deciding each row's verdict
        report: Text stream receiving "LINE <n>: <content>" entries

    Returns:
        ScanResult: Counts for the pass, from which the exit status follows

    Raises:
        InputError: If the input cannot be read
        WriteError: If the cleaned output cannot be written
    """
    result = ScanResult(
        rule=rule.name,
        required_columns=getattr(rule, "required_columns", None),
        output_path=config.input_path if config.inplace else config.output_path,
        inplace=config.inplace,
    )

    with cleaned_destination(config) as destination:
        for row in iter_rows(config.input_path, config.delimiter, config.encoding):
            result.lines_read += 1
            verdict = rule.check(row)

            if verdict is Verdict.OFFENDER:
                result.offender_count += 1
                report.write(format_offender(row, config.max_length) + "\n")
                logger.debug(
                    "Offending line",
                    extra={"line_number": row.number, "rule": rule.name},
                )
                continue

            if verdict is Verdict.PASSTHROUGH:
                result.passthrough_count += 1
            else:
                result.conforming_count += 1

            if destination is not None:
                destination.write(row.raw)

    report.flush()

    logger.info(
        f"Scanned {result.lines_read} lines: {result.offender_count} offending, "
        f"{result.conforming_count} conforming",
        extra={
            "file_path": str(config.input_path),
            "rule": rule.name,
            "offenders": result.offender_count,
        },
    )
    return result


def enforce_column_count(config: RunConfig, report: TextIO) -> ScanResult:
    """Run the column-count check, detecting the count when not given.

    Raises:
        DetectionError: If no explicit count was given and detection fails
        InputError: If the input cannot be read
        WriteError: If the cleaned output cannot be written
    """
    required = config.required_columns
    if required is None:
        required = detect_required_columns(
            config.input_path, config.delimiter, config.encoding
        )

    rule = ColumnCountRule(required, keep_blank=config.keep_blank)
    return scan_file(config, rule, report)


def check_first_column_integer(config: RunConfig, report: TextIO) -> ScanResult:
    """Run the first-column-integer check.

    Raises:
        InputError: If the input cannot be read
        WriteError: If the cleaned output cannot be written
    """
    return scan_file(config, FirstColumnIntegerRule(), report)
