"""Detection and scanning operations for csvgate."""

from .detect_ops import detect_required_columns, sample_field_counts
from .scan_ops import (
    check_first_column_integer,
    cleaned_destination,
    enforce_column_count,
    format_offender,
    iter_rows,
    scan_file,
    truncate_text,
)

__all__ = [
    # Detection
    "sample_field_counts",
    "detect_required_columns",
    # Scanning
    "iter_rows",
    "cleaned_destination",
    "scan_file",
    "enforce_column_count",
    "check_first_column_integer",
    "format_offender",
    "truncate_text",
]
