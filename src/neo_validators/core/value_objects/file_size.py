"""File size value object.

ONLY file size - a byte count with megabyte conversion and the fixed
precision formatting used in user-facing size messages.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass

from ...config.constants import ValidationDefaults


@dataclass(frozen=True)
class FileSize:
    """File size in bytes (1 MB = 1,048,576 bytes)."""

    value: int

    def __post_init__(self):
        """Validate non-negative size."""
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"FileSize must be an integer, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"FileSize cannot be negative: {self.value}")

    @classmethod
    def from_megabytes(cls, megabytes: int) -> "FileSize":
        """Create a size from a whole number of megabytes."""
        return cls(megabytes * ValidationDefaults.BYTES_IN_ONE_MB)

    @property
    def megabytes(self) -> float:
        """Size expressed in megabytes."""
        return self.value / ValidationDefaults.BYTES_IN_ONE_MB

    def exceeds(self, limit: "FileSize") -> bool:
        """Check whether this size is strictly greater than a limit."""
        return self.value > limit.value

    def format_megabytes(self, precision: int) -> str:
        """Format the megabyte value with a fixed number of decimals."""
        return f"{self.megabytes:.{precision}f}"

    def __str__(self) -> str:
        return f"{self.value} bytes"
