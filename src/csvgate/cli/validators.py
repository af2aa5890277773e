"""CLI argument resolution and validation utilities."""

from pathlib import Path

from ..core.config import validate_encoding
from ..core.exceptions import UsageError
from ..models.config import RunConfig
from ..utils.file_utils import default_cleaned_path, is_same_file, validate_input_path


def validate_delimiter(delimiter: str) -> str:
    """Validate delimiter argument.

    The value is used literally: a tab or other control character passed
    on the command line is the delimiter itself, with no escape processing.

    Args:
        delimiter: Delimiter string to validate

    Returns:
        Validated delimiter string

    Raises:
        UsageError: If the delimiter is empty
    """
    if not delimiter:
        raise UsageError("Delimiter must not be empty", option="-d")
    return delimiter


def validate_output_modes(output_file: str | None, inplace: bool) -> None:
    """Reject an explicit output path combined with in-place replacement.

    Raises:
        UsageError: If both modes were requested
    """
    if output_file is not None and inplace:
        raise UsageError("cannot use both -o OUTFILE and --inplace")


def validate_output_target(input_path: Path, output_path: Path | None) -> None:
    """Reject an output path that names the input file itself.

    Raises:
        UsageError: If the output would overwrite the input while reading it
    """
    if output_path is not None and is_same_file(input_path, output_path):
        raise UsageError(
            "output file is the input file",
            option="-o",
            details="use --inplace to replace the input",
        )


def resolve_run_config(
    input_file: str,
    delimiter: str,
    max_length: int,
    encoding: str,
    output_file: str | None = None,
    inplace: bool = False,
    required_columns: int | None = None,
    keep_blank: bool = False,
    remove: bool = False,
) -> RunConfig:
    """Resolve parsed command line values into a RunConfig.

    Flag combinations are checked before the input path is touched.

    Args:
        input_file: The single positional input path
        delimiter: Field delimiter
        max_length: Truncation length for reported lines
        encoding: Input text encoding
        output_file: Explicit cleaned output path (-o)
        inplace: Replace the input with the cleaned content
        required_columns: Explicit column count (--cols)
        keep_blank: Retain blank lines (--keep-blank)
        remove: Write a cleaned copy to the default path when no other
            destination is given (--remove)

    Returns:
        RunConfig: Resolved configuration

    Raises:
        UsageError: For invalid or conflicting options
        InputError: If the input file is missing or unreadable
    """
    validate_output_modes(output_file, inplace)
    validate_delimiter(delimiter)
    if max_length < 0:
        raise UsageError("MAXLEN must not be negative", option="-t")
    if required_columns is not None and required_columns < 1:
        raise UsageError("column count must be positive", option="--cols")
    encoding = validate_encoding(encoding)

    input_path = validate_input_path(input_file)

    output_path = Path(output_file) if output_file is not None else None
    if output_path is None and remove and not inplace:
        output_path = default_cleaned_path(input_path)
    validate_output_target(input_path, output_path)

    return RunConfig(
        input_path=input_path,
        delimiter=delimiter,
        max_length=max_length,
        output_path=output_path,
        inplace=inplace,
        required_columns=required_columns,
        keep_blank=keep_blank,
        encoding=encoding,
    )
