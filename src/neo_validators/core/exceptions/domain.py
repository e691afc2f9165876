"""Domain-specific exceptions for neo-validators."""

from typing import Any, Optional

from .base import NeoValidatorsError


# Configuration Errors
class ConfigurationError(NeoValidatorsError):
    """Raised when a validator is misconfigured or used before initialization."""
    pass


# Encoded File Errors
class EncodedFileError(NeoValidatorsError):
    """Base class for encoded-file decoding errors."""
    pass


class MalformedEncodedFileError(EncodedFileError):
    """Raised when a value does not follow the data URI wire format."""
    pass


class InvalidEncodedContentError(EncodedFileError):
    """Raised when the base64 payload has an illegal alphabet or padding."""
    pass


# Accessor Errors
class AccessorError(NeoValidatorsError):
    """Raised when an enum accessor fails while being invoked."""

    def __init__(self, accessor_name: str, enum_name: str, cause: Optional[BaseException] = None):
        super().__init__(
            f"Failed to access the '{accessor_name}' accessor of Enum {enum_name}",
            details={
                "accessor_name": accessor_name,
                "enum_name": enum_name,
                "cause": repr(cause) if cause else None,
            },
        )
        self.accessor_name = accessor_name
        self.enum_name = enum_name


# Date Range Errors
class UnsupportedTemporalTypeError(NeoValidatorsError):
    """Raised when a value cannot be normalized to an instant."""

    def __init__(self, value: Any):
        type_name = type(value).__name__
        super().__init__(
            f"Unsupported date type: {type_name}",
            details={"type": type_name},
        )
        self.type_name = type_name


class FieldAccessError(NeoValidatorsError):
    """Raised when a target object does not expose a configured field."""

    def __init__(self, field_name: str, target_type: str):
        super().__init__(
            f"{target_type} has no field '{field_name}'",
            details={"field_name": field_name, "target_type": target_type},
        )
        self.field_name = field_name
        self.target_type = target_type
