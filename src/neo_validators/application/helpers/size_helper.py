"""Size formatting helpers for user-facing messages."""

from ...config.constants import ValidationDefaults
from ...core.value_objects import FileSize


def format_megabytes(size_bytes: int, precision: int) -> str:
    """Format a byte count as megabytes with a fixed number of decimals."""
    return FileSize(size_bytes).format_megabytes(precision)


def format_actual_size(size_bytes: int) -> str:
    return format_megabytes(size_bytes, ValidationDefaults.ACTUAL_SIZE_PRECISION)


def format_limit_size(size_bytes: int) -> str:
    return format_megabytes(size_bytes, ValidationDefaults.LIMIT_SIZE_PRECISION)
