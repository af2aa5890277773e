"""Click-based CLI entry points for the csvgate validation tools."""

import sys
from collections.abc import Callable
from typing import Any

import click

from .. import __version__
from ..core.config import DEFAULT_DELIMITER, DEFAULT_MAX_LENGTH, get_default_encoding
from ..utils.logging_utils import init_default_logging
from ..utils.rich_utils import install_rich_tracebacks
from .commands import ValidationHandler
from .validators import resolve_run_config

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EXIT_CODES_HELP = """
\b
Exit code:
  0 if no offenders found
  1 if offenders were found
  2 on usage/config errors
"""


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by both tools."""
    decorators = [
        click.argument("input_file", metavar="FILE"),
        click.option(
            "-d",
            "delimiter",
            default=DEFAULT_DELIMITER,
            show_default=True,
            metavar="DELIM",
            help="Column delimiter, taken literally (e.g. a TAB character)",
        ),
        click.option(
            "-t",
            "max_length",
            type=click.IntRange(min=0),
            default=DEFAULT_MAX_LENGTH,
            show_default=True,
            metavar="MAXLEN",
            help="Truncate printed lines to this many characters",
        ),
        click.option(
            "-o",
            "output_file",
            type=click.Path(dir_okay=False),
            metavar="OUTFILE",
            help="Write cleaned output to OUTFILE (implies cleaning)",
        ),
        click.option(
            "--inplace",
            is_flag=True,
            help="Replace the input file with cleaned content",
        ),
        click.option(
            "--encoding",
            default=get_default_encoding,
            show_default="utf-8 or $CSVGATE_ENCODING",
            help="Input text encoding",
        ),
        click.option(
            "--summary",
            is_flag=True,
            help="Print a one-line summary to standard error",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.command(
    "enforce-column-count",
    context_settings=CONTEXT_SETTINGS,
    epilog=EXIT_CODES_HELP,
)
@common_options
@click.option(
    "--cols",
    "required_columns",
    type=click.IntRange(min=1),
    metavar="N",
    help="Required column count; overrides auto-detection",
)
@click.option(
    "--keep-blank",
    is_flag=True,
    help="Keep completely blank lines (not counted toward detection; "
    "retained during cleaning). A CRLF line with nothing before the "
    "terminator counts as blank",
)
@click.version_option(__version__, "--version")
def enforce_column_count(
    input_file: str,
    delimiter: str,
    max_length: int,
    output_file: str | None,
    inplace: bool,
    encoding: str,
    summary: bool,
    required_columns: int | None,
    keep_blank: bool,
) -> None:
    """Validate and clean a CSV by enforcing a fixed number of columns.

    If --cols is not provided, the first three NON-EMPTY lines are inspected.
    If all of them have the same column count, that count is used; otherwise
    the run aborts and asks for --cols N.

    Every line whose column count differs from the required count is printed
    to standard output as "LINE <n>: <content>". With -o or --inplace, only
    valid rows are written to the output.

    Fields are split naively on the delimiter; quoted delimiters are not
    recognised.
    """
    handler = ValidationHandler(summary=summary)
    status = handler.handle_enforce_column_count(
        lambda: resolve_run_config(
            input_file,
            delimiter=delimiter,
            max_length=max_length,
            encoding=encoding,
            output_file=output_file,
            inplace=inplace,
            required_columns=required_columns,
            keep_blank=keep_blank,
        )
    )
    sys.exit(status)


@click.command(
    "check-firstcol-int",
    context_settings=CONTEXT_SETTINGS,
    epilog=EXIT_CODES_HELP,
)
@common_options
@click.option(
    "--remove",
    is_flag=True,
    help='Also write a cleaned file containing only valid rows '
    '(default "<input>.cleaned.csv")',
)
@click.version_option(__version__, "--version")
def check_firstcol_int(
    input_file: str,
    delimiter: str,
    max_length: int,
    output_file: str | None,
    inplace: bool,
    encoding: str,
    summary: bool,
    remove: bool,
) -> None:
    """Check that the first column of every row is an integer (digits only).

    A line is valid if its first field, trimmed of spaces, tabs, CR and LF,
    consists of one or more ASCII digits. Offending lines are printed to
    standard output as "LINE <n>: <content>".

    With --remove and no -o/--inplace, the cleaned copy goes to the input
    name with a trailing ".csv" replaced by ".cleaned.csv" (other names get
    ".cleaned.csv" appended).

    Fields are split naively on the delimiter; quoted delimiters are not
    recognised.
    """
    handler = ValidationHandler(summary=summary)
    status = handler.handle_check_firstcol_int(
        lambda: resolve_run_config(
            input_file,
            delimiter=delimiter,
            max_length=max_length,
            encoding=encoding,
            output_file=output_file,
            inplace=inplace,
            remove=remove,
        )
    )
    sys.exit(status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, "--version")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """csvgate - validate and clean delimited files before ingestion."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(enforce_column_count)
cli.add_command(check_firstcol_int)


def _run(command: click.Command, operation: str) -> None:
    install_rich_tracebacks()
    init_default_logging(operation)
    command(prog_name=operation)


def main() -> None:
    """Entry point for the csvgate command group."""
    _run(cli, "csvgate")


def enforce_column_count_main() -> None:
    """Entry point for csv-enforce-column-count."""
    _run(enforce_column_count, "csv-enforce-column-count")


def check_firstcol_int_main() -> None:
    """Entry point for check-firstcol-int."""
    _run(check_firstcol_int, "check-firstcol-int")


if __name__ == "__main__":
    main()
