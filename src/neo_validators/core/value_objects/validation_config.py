"""File validation configuration.

FileValidationOptions is what a host supplies for one constraint usage
(megabyte denominated, possibly out of range). ValidationConfig is the
immutable, byte-denominated policy a validator keeps after initialization.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ...config.constants import ValidationDefaults
from .file_size import FileSize


@dataclass(frozen=True)
class FileValidationOptions:
    """Static configuration of a file constraint as declared by the host."""

    allowed_media_types: Iterable[str] = field(default=ValidationDefaults.ALLOWED_MEDIA_TYPES)
    max_size_mb: int = ValidationDefaults.MAX_SIZE_IN_MB
    max_file_count: int = ValidationDefaults.MAX_FILE_COUNT
    max_total_size_mb: int = ValidationDefaults.MAX_TOTAL_SIZE_IN_MB


@dataclass(frozen=True)
class ValidationConfig:
    """Resolved file policy; every bound is positive."""

    allowed_media_types: Tuple[str, ...]
    max_size_bytes: int
    max_item_count: int
    max_aggregate_size_bytes: int

    def __post_init__(self):
        for name in ("max_size_bytes", "max_item_count", "max_aggregate_size_bytes"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @property
    def max_size(self) -> FileSize:
        return FileSize(self.max_size_bytes)

    @property
    def max_aggregate_size(self) -> FileSize:
        return FileSize(self.max_aggregate_size_bytes)

    def allows(self, media_type: Optional[str]) -> bool:
        """Check a media type against the allowed set; an empty set allows all."""
        if not self.allowed_media_types:
            return True
        return media_type in self.allowed_media_types

    def allowed_media_types_text(self) -> str:
        """Allowed media types joined for messages, in declaration order."""
        return ValidationDefaults.VALID_VALUES_SEPARATOR.join(self.allowed_media_types)
