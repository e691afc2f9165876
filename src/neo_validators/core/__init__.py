"""Core module for neo-validators.

Value objects, exceptions and the protocols of external collaborators.
No validation logic lives here.
"""

from .exceptions import *
from .protocols import *
from .value_objects import *

__all__ = [
    # Exceptions
    "NeoValidatorsError",
    "AccessorError",
    "ConfigurationError",
    "EncodedFileError",
    "FieldAccessError",
    "InvalidEncodedContentError",
    "MalformedEncodedFileError",
    "UnsupportedTemporalTypeError",

    # Protocols
    "ContentSniffer",
    "MessageResolver",
    "ViolationSink",

    # Value objects
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
