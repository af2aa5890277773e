"""Result models for detection and scanning."""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any


class ExitStatus(IntEnum):
    """Process exit status shared by every csvgate tool."""

    CLEAN = 0
    OFFENDERS = 1
    ERROR = 2


@dataclass
class DetectionSample:
    """Field counts of the first few non-blank lines of a file."""

    counts: list[int] = field(default_factory=list)
    line_numbers: list[int] = field(default_factory=list)

    def add(self, line_number: int, count: int) -> None:
        """Record the field count of a sampled line."""
        self.line_numbers.append(line_number)
        self.counts.append(count)

    @property
    def is_empty(self) -> bool:
        """Whether no non-blank line was sampled."""
        return not self.counts

    @property
    def distinct_counts(self) -> list[int]:
        """Distinct counts in the order first observed."""
        return list(dict.fromkeys(self.counts))

    @property
    def agreed_count(self) -> int | None:
        """The single shared count, or None if the sample is empty or disagrees."""
        if len(self.distinct_counts) == 1:
            return self.counts[0]
        return None


@dataclass
class ScanResult:
    """Outcome of one classification pass over a file.

    The exit status is derived from this object alone, so the reported
    offenders and the final status always come from the same pass.
    """

    rule: str
    lines_read: int = 0
    conforming_count: int = 0
    offender_count: int = 0
    passthrough_count: int = 0
    required_columns: int | None = None
    output_path: Path | None = None
    inplace: bool = False

    @property
    def has_offenders(self) -> bool:
        """Whether any row failed the rule."""
        return self.offender_count > 0

    @property
    def exit_status(self) -> ExitStatus:
        """Exit status for the pass: CLEAN or OFFENDERS."""
        return ExitStatus.OFFENDERS if self.has_offenders else ExitStatus.CLEAN

    @property
    def written_count(self) -> int:
        """Number of lines in the cleaned copy (when cleaning)."""
        return self.conforming_count + self.passthrough_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured output."""
        return {
            "rule": self.rule,
            "lines_read": self.lines_read,
            "conforming_count": self.conforming_count,
            "offender_count": self.offender_count,
            "passthrough_count": self.passthrough_count,
            "required_columns": self.required_columns,
            "output_path": str(self.output_path) if self.output_path else None,
            "inplace": self.inplace,
            "exit_status": int(self.exit_status),
        }
