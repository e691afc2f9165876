"""Value objects for neo-validators."""

from .bound_accessor import BoundAccessor
from .decoded_payload import DecodedPayload
from .file_size import FileSize
from .media_type import MediaTypeExtension, extract_extension
from .temporal_value import (
    CalendarTimestamp,
    DateOnly,
    LocalDateTime,
    TemporalValue,
    ZonedDateTime,
)
from .validation_config import FileValidationOptions, ValidationConfig
from .violation import Violation

__all__ = [
    "BoundAccessor",
    "DecodedPayload",
    "FileSize",
    "MediaTypeExtension",
    "extract_extension",
    "CalendarTimestamp",
    "DateOnly",
    "LocalDateTime",
    "TemporalValue",
    "ZonedDateTime",
    "FileValidationOptions",
    "ValidationConfig",
    "Violation",
]
