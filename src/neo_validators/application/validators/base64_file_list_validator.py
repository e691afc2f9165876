"""Base64 file list validator.

ONLY list-of-encoded-files validation - bounds the number of items and
their aggregate decoded size, then checks each item in order for
duplicates and delegates it to the single-file validator.

Duplicates are detected on the raw encoded strings, so the same bytes
declared with different media types are not considered duplicates.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import List, Optional, Set

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings
from ...core.protocols import ContentSniffer, MessageResolver, ViolationSink
from ...core.value_objects import FileValidationOptions, ValidationConfig
from ..helpers.base64_collection_helper import Base64CollectionHelper
from ..helpers.size_helper import format_actual_size, format_limit_size
from .base64_file_validator import Base64FileValidator

logger = logging.getLogger(__name__)


class Base64FileListValidator:
    """Validator for a list of data URI encoded files."""

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

    def is_valid(self, values: Optional[List[Optional[str]]], sink: Optional[ViolationSink] = None) -> bool:
        """Validate a list of encoded files, reporting the first failure."""
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
        values: List[Optional[str]],
        config: ValidationConfig,
        sink: Optional[ViolationSink],
    ) -> bool:
        if self._helper.exceeds_item_count(len(values)):
            self._reporter.report(sink, MessageKeys.BASE64_FILE_MAX_FILE_COUNT, config.max_item_count)
            return False

        total = self._helper.total_size(values)
        if self._helper.exceeds_aggregate_size(total):
            self._reporter.report(
                sink,
                MessageKeys.BASE64_FILE_MAX_TOTAL_SIZE,
                format_actual_size(total.value),
                format_limit_size(config.max_aggregate_size_bytes),
            )
            return False

        seen: Set[str] = set()
        item_validator = self._helper.item_validator

        for position, value in enumerate(values, start=1):
            if value is not None:
                if value in seen:
                    self._reporter.report(sink, MessageKeys.BASE64_FILE_DUPLICATE_FILE, position)
                    return False
                seen.add(value)

            inspection = item_validator.inspect(value)
            if not inspection.valid:
                self._reporter.report(
                    sink,
                    MessageKeys.BASE64_FILE_INVALID_LIST,
                    position,
                    item_validator.describe(inspection, sink),
                )
                return False

        return True


def create_base64_file_list_validator(
    options: Optional[FileValidationOptions] = None,
    sniffer: Optional[ContentSniffer] = None,
    resolver: Optional[MessageResolver] = None,
) -> Base64FileListValidator:
    """Create and initialize base64 file list validator."""
    validator = Base64FileListValidator(sniffer=sniffer, resolver=resolver)
    validator.initialize(options)
    return validator
