"""CLI module for csvgate."""

from .commands import ValidationHandler
from .main import (
    check_firstcol_int,
    check_firstcol_int_main,
    cli,
    enforce_column_count,
    enforce_column_count_main,
)
from .validators import (
    resolve_run_config,
    validate_delimiter,
    validate_output_modes,
    validate_output_target,
)

__all__ = [
    # Commands
    "cli",
    "enforce_column_count",
    "enforce_column_count_main",
    "check_firstcol_int",
    "check_firstcol_int_main",
    "ValidationHandler",
    # Validators
    "resolve_run_config",
    "validate_delimiter",
    "validate_output_modes",
    "validate_output_target",
]
