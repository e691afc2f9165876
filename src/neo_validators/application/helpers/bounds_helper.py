"""Bound resolution helpers.

ONLY bound resolution - turns host supplied, megabyte denominated options
into the immutable byte denominated ValidationConfig. Non-positive bounds
are replaced with the configured defaults once, at initialization.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Optional

from ...config.constants import ValidationDefaults
from ...config.settings import ValidatorSettings, get_settings
from ...core.value_objects import FileValidationOptions, ValidationConfig

logger = logging.getLogger(__name__)


def resolve_positive_bound(value: Optional[int], default: int, name: str, owner: str = "validator") -> int:
    """Return value when positive, otherwise log and return the default."""
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    logger.warning(
        f"{owner}: invalid {name}={value!r}, using default {default} for this instance"
    )
    return default


def resolve_validation_config(
    options: Optional[FileValidationOptions] = None,
    settings: Optional[ValidatorSettings] = None,
    owner: str = "validator",
) -> ValidationConfig:
    """Build a ValidationConfig from file options and settings defaults."""
    options = options or FileValidationOptions()
    settings = settings or get_settings()

    max_size_mb = resolve_positive_bound(
        options.max_size_mb, settings.default_max_size_mb, "max_size_mb", owner
    )
    max_file_count = resolve_positive_bound(
        options.max_file_count, settings.default_max_file_count, "max_file_count", owner
    )
    max_total_size_mb = resolve_positive_bound(
        options.max_total_size_mb, settings.default_max_total_size_mb, "max_total_size_mb", owner
    )

    declared = options.allowed_media_types or ()
    if isinstance(declared, str):
        declared = (declared,)
    # preserve declaration order, drop repeats
    allowed = tuple(dict.fromkeys(declared))

    return ValidationConfig(
        allowed_media_types=allowed,
        max_size_bytes=max_size_mb * ValidationDefaults.BYTES_IN_ONE_MB,
        max_item_count=max_file_count,
        max_aggregate_size_bytes=max_total_size_mb * ValidationDefaults.BYTES_IN_ONE_MB,
    )
