"""Custom exception hierarchy for the csvgate validation tools."""


class CsvGateError(Exception):
    """Base exception for csvgate.

    This is the root exception class for all csvgate-specific errors.
    Every error in this hierarchy is fatal to the current invocation and
    maps to the usage/configuration exit status.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class UsageError(CsvGateError):
    """Command line usage errors.

    Raised for bad, missing or conflicting flags and for a wrong number of
    positional arguments. Always raised before any file I/O.
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        details: str | None = None,
    ):
        """Initialize the usage error.

        Args:
            message: The main error message
            option: The command line option that was misused
            details: Optional additional details about the error
        """
        self.option = option
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with option context."""
        parts = [self.message]

        if self.option:
            parts.append(f"Option: {self.option}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class InputError(CsvGateError):
    """Input file errors.

    Raised when the input file is missing, is not a regular file,
    or cannot be read.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: str | None = None,
    ):
        """Initialize the input error.

        Args:
            message: The main error message
            file_path: The input path that caused the error
            details: Optional additional details about the error
        """
        self.file_path = file_path
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with file context."""
        parts = [self.message]

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class DetectionError(CsvGateError):
    """Column count detection errors.

    Raised when the required column count cannot be inferred from the
    first non-blank lines of the input, either because there are none or
    because their field counts disagree.
    """

    def __init__(
        self,
        message: str,
        counts: list[int] | None = None,
        details: str | None = None,
    ):
        """Initialize the detection error.

        Args:
            message: The main error message
            counts: Field counts observed in the sampled lines, in file order
            details: Optional additional details about the error
        """
        self.counts = list(counts) if counts else []
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with the observed counts."""
        msg = self.message
        if self.counts:
            msg += ": " + " ".join(str(count) for count in self.counts)
        if self.details:
            msg += f". {self.details}"
        return msg


class WriteError(CsvGateError):
    """Output write errors.

    Raised when the cleaned output cannot be created, written or renamed
    into place. The original input is left unmodified.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        operation: str | None = None,
        details: str | None = None,
    ):
        """Initialize the write error.

        Args:
            message: The main error message
            file_path: The output path that caused the error
            operation: The file operation that failed (create, write, rename)
            details: Optional additional details about the error
        """
        self.file_path = file_path
        self.operation = operation
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with file context."""
        parts = [self.message]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)
