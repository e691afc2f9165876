"""Shared validation helpers."""

from .bounds_helper import resolve_positive_bound, resolve_validation_config
from .size_helper import format_actual_size, format_limit_size, format_megabytes
from .violation_helper import ViolationReporter
from .base64_collection_helper import Base64CollectionHelper

__all__ = [
    "resolve_positive_bound",
    "resolve_validation_config",
    "format_actual_size",
    "format_limit_size",
    "format_megabytes",
    "ViolationReporter",
    "Base64CollectionHelper",
]
