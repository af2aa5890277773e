"""Validation rules applied to each row during a scan."""

import re
from typing import Protocol

from csvgate.models.row import Row, Verdict

# ASCII digits only; str.isdigit() and \d would also accept other scripts
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Whitespace trimmed from the first field before matching
FIELD_WHITESPACE = " \t\r\n"


class ValidationRule(Protocol):
    """A predicate over a row, reporting its verdict."""

    name: str

    def check(self, row: Row) -> Verdict: ...


class ColumnCountRule:
    """Row is valid iff it has exactly the required number of fields.

    Blank lines offend unless keep_blank is set, in which case they pass
    through untouched and are never reported.
    """

    name = "column-count"

    def __init__(self, required_columns: int, keep_blank: bool = False):
        if required_columns < 1:
            raise ValueError(
                f"required_columns must be positive, got {required_columns}"
            )
        self.required_columns = required_columns
        self.keep_blank = keep_blank

    def check(self, row: Row) -> Verdict:
        if row.is_blank:
            return Verdict.PASSTHROUGH if self.keep_blank else Verdict.OFFENDER
        if row.field_count == self.required_columns:
            return Verdict.CONFORMING
        return Verdict.OFFENDER

    def __repr__(self) -> str:
        return (
            f"ColumnCountRule(required_columns={self.required_columns}, "
            f"keep_blank={self.keep_blank})"
        )


class FirstColumnIntegerRule:
    """Row is valid iff its trimmed first field is one or more ASCII digits.

    Leading zeros are accepted and no range check is made. A blank line
    has an empty first field and therefore always offends.
    """

    name = "first-column-integer"

    def check(self, row: Row) -> Verdict:
        if is_plain_integer(row.first_field):
            return Verdict.CONFORMING
        return Verdict.OFFENDER

    def __repr__(self) -> str:
        return "FirstColumnIntegerRule()"


def is_plain_integer(value: str) -> bool:
    """Check whether a field is a plain non-negative integer.

    Args:
        value: Raw field text

    Returns:
        bool: True if the value, trimmed of spaces, tabs, CR and LF, is all digits
    """
    return DIGITS_PATTERN.fullmatch(value.strip(FIELD_WHITESPACE)) is not None
