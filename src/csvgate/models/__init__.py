"""Data models for csvgate."""

from csvgate.models.config import RunConfig
from csvgate.models.result import DetectionSample, ExitStatus, ScanResult
from csvgate.models.row import Row, Verdict
from csvgate.models.rules import (
    ColumnCountRule,
    FirstColumnIntegerRule,
    ValidationRule,
    is_plain_integer,
)

__all__ = [
    # Row models
    "Row",
    "Verdict",
    # Rules
    "ValidationRule",
    "ColumnCountRule",
    "FirstColumnIntegerRule",
    "is_plain_integer",
    # Config models
    "RunConfig",
    # Result models
    "DetectionSample",
    "ScanResult",
    "ExitStatus",
]
