"""csvgate - structural validation and cleaning of delimited files."""

__version__ = "1.0.0"

# Core functionality
from .core.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_MAX_LENGTH,
    TRUNCATION_MARKER,
)
from .core.exceptions import (
    CsvGateError,
    DetectionError,
    InputError,
    UsageError,
    WriteError,
)

# Models
from .models.config import RunConfig
from .models.result import DetectionSample, ExitStatus, ScanResult
from .models.row import Row, Verdict
from .models.rules import ColumnCountRule, FirstColumnIntegerRule, ValidationRule

# Operations
from .operations.detect_ops import detect_required_columns, sample_field_counts
from .operations.scan_ops import (
    check_first_column_integer,
    enforce_column_count,
    format_offender,
    scan_file,
    truncate_text,
)

__all__ = [
    "__version__",
    # Core
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCODING",
    "DEFAULT_MAX_LENGTH",
    "TRUNCATION_MARKER",
    # Exceptions
    "CsvGateError",
    "UsageError",
    "InputError",
    "DetectionError",
    "WriteError",
    # Models
    "RunConfig",
    "Row",
    "Verdict",
    "ValidationRule",
    "ColumnCountRule",
    "FirstColumnIntegerRule",
    "DetectionSample",
    "ScanResult",
    "ExitStatus",
    # Operations
    "sample_field_counts",
    "detect_required_columns",
    "scan_file",
    "enforce_column_count",
    "check_first_column_integer",
    "format_offender",
    "truncate_text",
]
