"""Column count detection for the column-count tool."""

from pathlib import Path

from ..core.config import DETECTION_SAMPLE_SIZE
from ..core.exceptions import DetectionError, InputError
from ..models.result import DetectionSample
from ..models.row import Row
from ..utils.logging_utils import get_logger, log_operation

logger = get_logger(__name__)


def sample_field_counts(
    input_path: Path,
    delimiter: str,
    encoding: str = "utf-8",
    sample_size: int = DETECTION_SAMPLE_SIZE,
) -> DetectionSample:
    """Collect field counts from the first non-blank lines of a file.

    Reading stops as soon as sample_size non-blank lines have been seen.

    Args:
        input_path: File to sample
        delimiter: Field delimiter
        encoding: Text encoding
        sample_size: Number of non-blank lines to sample

    Returns:
        DetectionSample: Counts and line numbers of the sampled lines

    Raises:
        InputError: If the file cannot be read
    """
    sample = DetectionSample()
    try:
        with open(input_path, "rb") as handle:
            for number, raw in enumerate(handle, start=1):
                row = Row.from_raw(number, raw, delimiter, encoding)
                if row.is_blank:
                    continue
                sample.add(number, row.field_count)
                if len(sample.counts) >= sample_size:
                    break
    except OSError as e:
        raise InputError(
            "Cannot read input file", file_path=str(input_path), details=str(e)
        ) from e
    return sample


@log_operation("detect_columns")
def detect_required_columns(
    input_path: Path, delimiter: str, encoding: str = "utf-8"
) -> int:
    """Infer the required column count from the first three non-blank lines.

    Args:
        input_path: File to inspect
        delimiter: Field delimiter
        encoding: Text encoding

    Returns:
        int: The field count shared by every sampled line

    Raises:
        DetectionError: If there is no non-blank line or the counts disagree
    """
    sample = sample_field_counts(input_path, delimiter, encoding)

    if sample.is_empty:
        raise DetectionError(
            "could not detect column count (file has no non-empty lines)",
            details="Specify --cols N.",
        )

    required = sample.agreed_count
    if required is None:
        raise DetectionError(
            "first three non-empty lines have unequal column counts",
            counts=sample.counts,
            details="Please specify the required column count via --cols N.",
        )

    logger.info(
        f"Detected {required} columns from lines "
        f"{', '.join(str(n) for n in sample.line_numbers)}",
        extra={"file_path": str(input_path)},
    )
    return required
