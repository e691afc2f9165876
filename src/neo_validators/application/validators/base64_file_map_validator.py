"""Base64 file map validator.

ONLY name-keyed encoded file validation - validates a mapping of file name
to data URI content. Besides the list checks (count, aggregate size,
per-item pipeline, duplicates) every entry's file name must be well formed
and its extension must agree with the sniffed content type.

Entries are checked in iteration order and the first failure wins:

1. blank file name
2. blank content
3. file name grammar (no leading dot, ``<base>.<ext>``)
4. single-file pipeline (format, content, size, allowed type)
5. sniffed type without a known extension
6. file name extension not in the media type table
7. extension differs from the one expected for the sniffed type
8. content already seen in a previous entry

Following maximum separation architecture - one file = one purpose.
"""

import logging
import re
from typing import Dict, Optional, Set

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings
from ...core.protocols import ContentSniffer, MessageResolver, ViolationSink
from ...core.value_objects import FileValidationOptions, MediaTypeExtension, ValidationConfig
from ...core.value_objects.media_type import extract_extension
from ..helpers.base64_collection_helper import Base64CollectionHelper
from ..helpers.size_helper import format_actual_size, format_limit_size
from .base64_file_validator import Base64FileValidator

logger = logging.getLogger(__name__)

VALID_FILE_NAME_PATTERN = re.compile(r"(?!\.)[a-zA-Z0-9_-]+\.[a-zA-Z0-9]+")


def is_valid_file_name(file_name: Optional[str]) -> bool:
    """Check a file name against the ``<base>.<ext>`` grammar."""
    if not file_name or not file_name.strip():
        return False
    return VALID_FILE_NAME_PATTERN.fullmatch(file_name) is not None


class Base64FileMapValidator:
    """Validator for a mapping of file names to data URI encoded files."""

    def __init__(
        self,
        sniffer: Optional[ContentSniffer] = None,
        resolver: Optional[MessageResolver] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        item_validator = Base64FileValidator(sniffer=sniffer, resolver=resolver, settings=settings)
        self._helper = Base64CollectionHelper(item_validator)
        self._reporter = item_validator.reporter

    def initialize(self, options: Optional[FileValidationOptions] = None) -> None:
        self._helper.initialize(options)

    @property
    def config(self) -> ValidationConfig:
        return self._helper.config

    def is_valid(self, values: Optional[Dict[str, Optional[str]]], sink: Optional[ViolationSink] = None) -> bool:
        """Validate a name-keyed collection of encoded files."""
        config = self.config
        if not values:
            return True
        try:
            return self._validate(values, config, sink)
        except Exception as e:
            logger.error(f"Unexpected error while validating collection: {e}", exc_info=True)
            self._reporter.report(sink, MessageKeys.BASE64_FILE_INVALID_GENERAL)
            return False

    def _validate(
        self,
        values: Dict[str, Optional[str]],
        config: ValidationConfig,
        sink: Optional[ViolationSink],
    ) -> bool:
        if self._helper.exceeds_item_count(len(values)):
            self._reporter.report(sink, MessageKeys.BASE64_FILE_MAX_FILE_COUNT, config.max_item_count)
            return False

        total = self._helper.total_size(values.values())
        if self._helper.exceeds_aggregate_size(total):
            self._reporter.report(
                sink,
                MessageKeys.BASE64_FILE_MAX_TOTAL_SIZE,
                format_actual_size(total.value),
                format_limit_size(config.max_aggregate_size_bytes),
            )
            return False

        seen: Set[str] = set()
        for position, (file_name, content) in enumerate(values.items(), start=1):
            if not self._is_valid_entry(file_name, content, position, seen, sink):
                return False
        return True

    def _is_valid_entry(
        self,
        file_name: Optional[str],
        content: Optional[str],
        position: int,
        seen: Set[str],
        sink: Optional[ViolationSink],
    ) -> bool:
        if file_name is None or not file_name.strip():
            self._reporter.report(sink, MessageKeys.MISSING_FILENAME, position)
            return False

        if content is None or not content.strip():
            self._reporter.report(sink, MessageKeys.MISSING_BASE64_CONTENT, file_name, position)
            return False

        if not is_valid_file_name(file_name):
            self._reporter.report(sink, MessageKeys.INVALID_FILENAME, file_name, position)
            return False

        item_validator = self._helper.item_validator
        inspection = item_validator.inspect(content)
        if not inspection.valid:
            self._reporter.report(
                sink,
                MessageKeys.BASE64_FILE_INVALID_LIST,
                position,
                item_validator.describe(inspection, sink),
            )
            return False

        expected_extension = MediaTypeExtension.extension_for(inspection.detected_media_type)
        if expected_extension is None:
            self._reporter.report(
                sink, MessageKeys.UNSUPPORTED_FILE_TYPE, position, inspection.detected_media_type
            )
            return False

        extension = extract_extension(file_name)
        if not MediaTypeExtension.is_known_extension(extension):
            self._reporter.report(sink, MessageKeys.INVALID_EXTENSION, file_name, extension, position)
            return False

        if extension.lower() != expected_extension:
            self._reporter.report(
                sink,
                MessageKeys.EXTENSION_MISMATCH,
                file_name,
                extension,
                expected_extension,
                position,
            )
            return False

        if content in seen:
            self._reporter.report(sink, MessageKeys.BASE64_FILE_DUPLICATE_FILE, position)
            return False
        seen.add(content)
        return True


def create_base64_file_map_validator(
    options: Optional[FileValidationOptions] = None,
    sniffer: Optional[ContentSniffer] = None,
    resolver: Optional[MessageResolver] = None,
) -> Base64FileMapValidator:
    """Create and initialize base64 file map validator."""
    validator = Base64FileMapValidator(sniffer=sniffer, resolver=resolver)
    validator.initialize(options)
    return validator
