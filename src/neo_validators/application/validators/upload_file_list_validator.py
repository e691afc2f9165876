"""Upload file list validator.

ONLY list-of-uploads validation - bounds the number of uploads and their
aggregate size, validates each upload in order and finally rejects
repeated file names.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import List, Optional, Set

from fastapi import UploadFile

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings
from ...core.protocols import ContentSniffer, MessageResolver, ViolationSink
from ...core.value_objects import FileSize, FileValidationOptions, ValidationConfig
from ..helpers.size_helper import format_actual_size, format_limit_size
from .upload_file_validator import UploadFileValidator, is_empty_upload, upload_size

logger = logging.getLogger(__name__)


class UploadFileListValidator:
    """Validator for a list of uploaded files."""

    def __init__(
        self,
        sniffer: Optional[ContentSniffer] = None,
        resolver: Optional[MessageResolver] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        self._item_validator = UploadFileValidator(sniffer=sniffer, resolver=resolver, settings=settings)
        self._reporter = self._item_validator.reporter

    def initialize(self, options: Optional[FileValidationOptions] = None) -> None:
        self._item_validator.initialize(options)

    @property
    def config(self) -> ValidationConfig:
        return self._item_validator.config

    def is_valid(self, uploads: Optional[List[Optional[UploadFile]]], sink: Optional[ViolationSink] = None) -> bool:
        config = self.config
        if not uploads:
            return True
        try:
            return self._validate(uploads, config, sink)
        except Exception as e:
            logger.error(f"Unexpected error while validating collection: {e}", exc_info=True)
            self._reporter.report(sink, MessageKeys.BASE64_FILE_INVALID_GENERAL)
            return False

    def _validate(
        self,
        uploads: List[Optional[UploadFile]],
        config: ValidationConfig,
        sink: Optional[ViolationSink],
    ) -> bool:
        if len(uploads) > config.max_item_count:
            self._reporter.report(sink, MessageKeys.UPLOAD_MAX_FILE_COUNT, config.max_item_count)
            return False

        total = FileSize(sum(0 if is_empty_upload(upload) else upload_size(upload) for upload in uploads))
        if total.exceeds(config.max_aggregate_size):
            self._reporter.report(
                sink,
                MessageKeys.UPLOAD_MAX_TOTAL_SIZE,
                format_actual_size(total.value),
                format_limit_size(config.max_aggregate_size_bytes),
            )
            return False

        for position, upload in enumerate(uploads, start=1):
            inspection = self._item_validator.inspect(upload)
            if not inspection.valid:
                item_message = self._reporter.render(sink, inspection.message_key, *inspection.message_args)
                self._reporter.report(sink, MessageKeys.UPLOAD_INVALID_LIST, position, item_message)
                return False

        seen: Set[str] = set()
        for position, upload in enumerate(uploads, start=1):
            if upload is None or not upload.filename:
                continue
            if upload.filename in seen:
                self._reporter.report(sink, MessageKeys.UPLOAD_DUPLICATE_FILE, upload.filename, position)
                return False
            seen.add(upload.filename)

        return True


def create_upload_file_list_validator(
    options: Optional[FileValidationOptions] = None,
    sniffer: Optional[ContentSniffer] = None,
    resolver: Optional[MessageResolver] = None,
) -> UploadFileListValidator:
    """Create and initialize upload file list validator."""
    validator = UploadFileListValidator(sniffer=sniffer, resolver=resolver)
    validator.initialize(options)
    return validator
