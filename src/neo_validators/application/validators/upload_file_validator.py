"""Upload file validator.

ONLY direct upload validation - checks a multipart upload received as a
FastAPI ``UploadFile``: the file name's extension must agree with the
sniffed content type, the type must be allowed and the size bounded.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import os
from typing import Optional

from fastapi import UploadFile

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings, get_settings
from ...core.exceptions import ConfigurationError
from ...core.protocols import ContentSniffer, MessageResolver, ViolationSink
from ...core.value_objects import FileSize, FileValidationOptions, MediaTypeExtension, ValidationConfig
from ...core.value_objects.media_type import extract_extension
from ..helpers.bounds_helper import resolve_validation_config
from ..helpers.size_helper import format_actual_size, format_limit_size
from ..helpers.violation_helper import ViolationReporter
from .base64_file_validator import FileInspection

logger = logging.getLogger(__name__)


def upload_size(upload: UploadFile) -> int:
    """Size of an upload in bytes, measuring the stream when the size is unknown."""
    if upload.size is not None:
        return upload.size
    stream = upload.file
    position = stream.tell()
    try:
        stream.seek(0, os.SEEK_END)
        return stream.tell()
    finally:
        stream.seek(position)


def is_empty_upload(upload: Optional[UploadFile]) -> bool:
    return upload is None or upload_size(upload) == 0


class UploadFileValidator:
    """Validator for one uploaded file.

    Checks, first failure wins:
    - absent or zero-length upload: valid
    - extension unknown or not matching the sniffed type: invalid extension
    - sniffed type not allowed: invalid type
    - size above the limit: invalid size

    When the stream cannot be read the client-declared content type is
    used in place of the sniffed type.
    """

    def __init__(
        self,
        sniffer: Optional[ContentSniffer] = None,
        resolver: Optional[MessageResolver] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        self._sniffer = sniffer
        self._settings = settings
        self._reporter = ViolationReporter(resolver)
        self._config: Optional[ValidationConfig] = None

    def initialize(self, options: Optional[FileValidationOptions] = None) -> None:
        settings = self._settings or get_settings()
        self._config = resolve_validation_config(options, settings, owner=type(self).__name__)
        if self._sniffer is None:
            from ...infrastructure.sniffers.magic_content_sniffer import create_magic_content_sniffer
            self._sniffer = create_magic_content_sniffer(settings)

    @property
    def config(self) -> ValidationConfig:
        if self._config is None:
            raise ConfigurationError(f"{type(self).__name__} used before initialize()")
        return self._config

    @property
    def reporter(self) -> ViolationReporter:
        return self._reporter

    def detect_media_type(self, upload: UploadFile) -> Optional[str]:
        """Sniff the upload stream, falling back to the declared content type."""
        try:
            return self._sniffer.detect_stream(upload.file)
        except OSError as e:
            logger.warning(
                f"Error detecting media type of upload; using declared content type "
                f"{upload.content_type}: {e}"
            )
            return upload.content_type

    def inspect(self, upload: Optional[UploadFile]) -> FileInspection:
        """Run every check on an upload and return the outcome without reporting it."""
        config = self.config
        try:
            return self._inspect(upload, config)
        except Exception as e:
            logger.error(f"Unexpected error while validating upload: {e}", exc_info=True)
            return FileInspection.failed(MessageKeys.BASE64_FILE_INVALID_GENERAL)

    def _inspect(self, upload: Optional[UploadFile], config: ValidationConfig) -> FileInspection:
        if is_empty_upload(upload):
            return FileInspection.passed()

        detected_media_type = self.detect_media_type(upload)
        extension = extract_extension(upload.filename)

        if not self._extension_matches(detected_media_type, extension):
            return FileInspection.failed(
                MessageKeys.UPLOAD_INVALID_EXTENSION,
                (extension or "").lower(),
                detected_media_type,
            )

        if not config.allows(detected_media_type):
            return FileInspection.failed(
                MessageKeys.UPLOAD_INVALID_TYPE,
                detected_media_type,
                config.allowed_media_types_text(),
            )

        size = FileSize(upload_size(upload))
        if size.exceeds(config.max_size):
            return FileInspection.failed(
                MessageKeys.UPLOAD_INVALID_SIZE,
                format_actual_size(size.value),
                format_limit_size(config.max_size_bytes),
            )

        return FileInspection(valid=True, detected_media_type=detected_media_type)

    @staticmethod
    def _extension_matches(media_type: Optional[str], extension: Optional[str]) -> bool:
        if not MediaTypeExtension.is_known_extension(extension):
            logger.warning(f"No known media type found for the extension: {extension}")
            return False
        return extension.lower() == MediaTypeExtension.extension_for(media_type)

    def is_valid(self, upload: Optional[UploadFile], sink: Optional[ViolationSink] = None) -> bool:
        """Validate one upload, reporting at most one violation."""
        inspection = self.inspect(upload)
        if not inspection.valid:
            self._reporter.report(sink, inspection.message_key, *inspection.message_args)
        return inspection.valid


def create_upload_file_validator(
    options: Optional[FileValidationOptions] = None,
    sniffer: Optional[ContentSniffer] = None,
    resolver: Optional[MessageResolver] = None,
) -> UploadFileValidator:
    """Create and initialize upload file validator."""
    validator = UploadFileValidator(sniffer=sniffer, resolver=resolver)
    validator.initialize(options)
    return validator
