"""Run configuration model for a single validation pass."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from csvgate.core.config import DEFAULT_DELIMITER, DEFAULT_ENCODING, DEFAULT_MAX_LENGTH


@dataclass
class RunConfig:
    """Settings resolved from the command line for one invocation."""

    input_path: Path
    delimiter: str = DEFAULT_DELIMITER
    max_length: int = DEFAULT_MAX_LENGTH
    output_path: Path | None = None
    inplace: bool = False
    required_columns: int | None = None
    keep_blank: bool = False
    encoding: str = DEFAULT_ENCODING

    @property
    def clean(self) -> bool:
        """Whether a cleaned copy is written (to output_path or in place)."""
        return self.inplace or self.output_path is not None

    def validate(self) -> bool:
        """Validate that all fields hold usable values.

        Returns:
            bool: True if configuration is valid
        """
        if not self.delimiter:
            return False

        if self.max_length < 0:
            return False

        if self.required_columns is not None and self.required_columns < 1:
            return False

        if self.inplace and self.output_path is not None:
            return False

        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary format.

        Returns:
            Dict[str, Any]: Configuration as dictionary
        """
        return {
            "input_path": str(self.input_path),
            "delimiter": self.delimiter,
            "max_length": self.max_length,
            "output_path": str(self.output_path) if self.output_path else None,
            "inplace": self.inplace,
            "required_columns": self.required_columns,
            "keep_blank": self.keep_blank,
            "encoding": self.encoding,
        }
