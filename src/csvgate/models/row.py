"""Row data model for line-oriented delimited files."""

from dataclasses import dataclass
from enum import Enum

# Undecodable bytes round-trip through text unchanged
DECODE_ERRORS = "surrogateescape"


class Verdict(Enum):
    """Outcome of applying a validation rule to a row."""

    CONFORMING = "conforming"
    OFFENDER = "offender"
    # Retained blank line: not classified, copied verbatim when cleaning
    PASSTHROUGH = "passthrough"


def strip_line_terminator(raw: bytes) -> bytes:
    """Remove a trailing "\\n" or "\\r\\n" from a raw line."""
    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n"):
        return raw[:-1]
    return raw


@dataclass(frozen=True)
class Row:
    """One line of an input file.

    Fields are obtained by plain splitting on the delimiter; quoted or
    escaped delimiters get no special treatment.
    """

    number: int
    raw: bytes
    text: str
    delimiter: str = ","

    @classmethod
    def from_raw(
        cls, number: int, raw: bytes, delimiter: str = ",", encoding: str = "utf-8"
    ) -> "Row":
        """Create a Row from the bytes of one line.

        Args:
            number: 1-based line number
            raw: Line bytes as read, including any terminator
            delimiter: Field delimiter
            encoding: Text encoding; undecodable bytes become lone
                surrogates so that re-encoding restores them

        Returns:
            Row: Row instance
        """
        text = strip_line_terminator(raw).decode(encoding, errors=DECODE_ERRORS)
        return cls(number=number, raw=raw, text=text, delimiter=delimiter)

    @property
    def is_blank(self) -> bool:
        """Whether the line is completely empty (zero fields).

        A bare "\\r\\n" line is empty too, since its terminator is stripped.
        """
        return self.text == ""

    @property
    def field_count(self) -> int:
        """Number of fields; an empty line has none."""
        if self.is_blank:
            return 0
        return self.text.count(self.delimiter) + 1

    @property
    def fields(self) -> list[str]:
        """Fields in order; an empty line has none."""
        if self.is_blank:
            return []
        return self.text.split(self.delimiter)

    @property
    def first_field(self) -> str:
        """The first field, or an empty string for an empty line."""
        return self.text.split(self.delimiter, 1)[0]
