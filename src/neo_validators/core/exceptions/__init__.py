"""Exceptions module for neo-validators."""

from .base import NeoValidatorsError
from .domain import (
    AccessorError,
    ConfigurationError,
    EncodedFileError,
    FieldAccessError,
    InvalidEncodedContentError,
    MalformedEncodedFileError,
    UnsupportedTemporalTypeError,
)

__all__ = [
    "NeoValidatorsError",
    "AccessorError",
    "ConfigurationError",
    "EncodedFileError",
    "FieldAccessError",
    "InvalidEncodedContentError",
    "MalformedEncodedFileError",
    "UnsupportedTemporalTypeError",
]
