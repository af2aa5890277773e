"""Command handlers for the csvgate CLI tools."""

import io
import sys
from collections.abc import Callable
from typing import TextIO

from rich.markup import escape

from ..core.exceptions import CsvGateError, UsageError
from ..models.config import RunConfig
from ..models.result import ExitStatus, ScanResult
from ..models.row import DECODE_ERRORS
from ..operations.scan_ops import check_first_column_integer, enforce_column_count
from ..utils.logging_utils import get_logger
from ..utils.rich_utils import get_console, print_error, print_muted, print_warning

logger = get_logger(__name__)

# Conventional status for a run stopped by Ctrl-C
INTERRUPTED_STATUS = 130

ScanOperation = Callable[[RunConfig, TextIO], ScanResult]


class ValidationHandler:
    """Runs a validation tool and turns its outcome into an exit status.

    Every error is fatal: it is reported on standard error and mapped to
    ExitStatus.ERROR, whether or not offenders were already reported.
    """

    def __init__(self, report: TextIO | None = None, summary: bool = False):
        """Initialize the handler.

        Args:
            report: Stream receiving offender entries (default: standard output)
            summary: Print a one-line summary to standard error after the pass
        """
        self.report = report
        self.summary = summary

    def _report_stream(self, config: RunConfig) -> TextIO:
        """Return the stream receiving offender entries.

        Standard output is switched to the input encoding with the same
        error handler used for decoding, so reported lines carry the
        input's original bytes, undecodable ones included.
        """
        if self.report is not None:
            return self.report
        stream = sys.stdout
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding=config.encoding, errors=DECODE_ERRORS)
        return stream

    def _handle_error(self, error: Exception) -> int:
        """Report a fatal error and return the error status."""
        if isinstance(error, UsageError):
            print_error(str(error))
            print_muted("Try '-h' for help.")
        elif isinstance(error, CsvGateError):
            print_error(str(error))
        else:
            print_error(f"Unexpected error: {error}")
            logger.debug("Unexpected error", exc_info=True)
            return int(ExitStatus.ERROR)

        logger.debug(str(error), extra={"operation": type(error).__name__})
        return int(ExitStatus.ERROR)

    def _print_summary(self, result: ScanResult) -> None:
        console = get_console()
        style = "warning" if result.has_offenders else "success"
        message = (
            f"[{style}]{result.offender_count} offending[/{style}] of "
            f"{result.lines_read} lines ({result.rule}"
        )
        if result.required_columns is not None:
            message += f", {result.required_columns} columns"
        message += ")"
        console.print(message)

        if result.inplace:
            console.print(f"[muted]Replaced input with {result.written_count} lines[/muted]")
        elif result.output_path is not None:
            console.print(
                f"[muted]Wrote {result.written_count} lines to {escape(str(result.output_path))}[/muted]"
            )

    def run(self, resolve: Callable[[], RunConfig], operation: ScanOperation) -> int:
        """Resolve arguments and run one scan operation.

        Args:
            resolve: Callable producing the RunConfig (may raise UsageError
                or InputError)
            operation: Scan operation to run with the resolved config

        Returns:
            int: Exit status (0 clean, 1 offenders, 2 error, 130 interrupted)
        """
        try:
            config = resolve()
            logger.debug("Resolved run configuration", extra=config.to_dict())
            result = operation(config, self._report_stream(config))
        except KeyboardInterrupt:
            print_warning("Interrupted.")
            return INTERRUPTED_STATUS
        except BrokenPipeError:
            # Report consumer went away (e.g. piped into head)
            return int(ExitStatus.ERROR)
        except Exception as e:
            return self._handle_error(e)

        if self.summary:
            self._print_summary(result)

        return int(result.exit_status)

    def handle_enforce_column_count(self, resolve: Callable[[], RunConfig]) -> int:
        """Run the column-count tool."""
        return self.run(resolve, enforce_column_count)

    def handle_check_firstcol_int(self, resolve: Callable[[], RunConfig]) -> int:
        """Run the first-column-integer tool."""
        return self.run(resolve, check_first_column_integer)
