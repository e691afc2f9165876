"""Base64 file validator.

ONLY single encoded file validation - decodes a data URI, bounds its size
and checks the sniffed content type against the allowed media types.

Checks run in a fixed order and the first failure wins:

1. absent or empty value: valid
2. value is not a data URI: invalid format
3. payload is not base64: invalid content
4. decoded size above the limit: invalid size
5. sniffed media type not allowed: invalid detected type
6. anything unexpected: general failure

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ...config.constants import MessageKeys
from ...config.settings import ValidatorSettings, get_settings
from ...core.exceptions import ConfigurationError, InvalidEncodedContentError, MalformedEncodedFileError
from ...core.protocols import ContentSniffer, MessageResolver, ViolationSink
from ...core.value_objects import DecodedPayload, FileValidationOptions, ValidationConfig
from ..decoders.base64_content_decoder import Base64ContentDecoder
from ..helpers.bounds_helper import resolve_validation_config
from ..helpers.size_helper import format_actual_size, format_limit_size
from ..helpers.violation_helper import ViolationReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInspection:
    """Outcome of inspecting one encoded file, without any reporting."""

    valid: bool
    message_key: Optional[str] = None
    message_args: Tuple[Any, ...] = ()
    payload: Optional[DecodedPayload] = None
    detected_media_type: Optional[str] = None

    @classmethod
    def passed(
        cls,
        payload: Optional[DecodedPayload] = None,
        detected_media_type: Optional[str] = None,
    ) -> "FileInspection":
        return cls(valid=True, payload=payload, detected_media_type=detected_media_type)

    @classmethod
    def failed(cls, message_key: str, *message_args: Any, payload: Optional[DecodedPayload] = None) -> "FileInspection":
        return cls(valid=False, message_key=message_key, message_args=message_args, payload=payload)


class Base64FileValidator:
    """Validator for one ``data:<type>/<subtype>;base64,<payload>`` value."""

    def __init__(
        self,
        sniffer: Optional[ContentSniffer] = None,
        resolver: Optional[MessageResolver] = None,
        decoder: Optional[Base64ContentDecoder] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        """Initialize file validator collaborators.

        Args:
            sniffer: Content sniffer; libmagic is used when omitted
            resolver: Message resolver for violation text
            decoder: Data URI decoder
            settings: Settings supplying default bounds
        """
        self._sniffer = sniffer
        self._settings = settings
        self._decoder = decoder or Base64ContentDecoder()
        self._reporter = ViolationReporter(resolver)
        self._config: Optional[ValidationConfig] = None

    def initialize(self, options: Optional[FileValidationOptions] = None) -> None:
        """Resolve the file policy once, before concurrent use."""
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

    def inspect(self, value: Optional[str]) -> FileInspection:
        """Run every check on a value and return the outcome without reporting it."""
        config = self.config
        try:
            return self._inspect(value, config)
        except Exception as e:
            logger.error(f"Unexpected error while validating encoded file: {e}", exc_info=True)
            return FileInspection.failed(MessageKeys.BASE64_FILE_INVALID_GENERAL)

    def _inspect(self, value: Optional[str], config: ValidationConfig) -> FileInspection:
        if not value:
            return FileInspection.passed()

        try:
            payload = self._decoder.decode(value)
        except MalformedEncodedFileError:
            return FileInspection.failed(MessageKeys.BASE64_FILE_INVALID_FORMAT)
        except InvalidEncodedContentError as e:
            logger.debug(f"Base64 invalid content: {e.details.get('reason')}")
            return FileInspection.failed(MessageKeys.BASE64_FILE_INVALID_CONTENT)

        if payload.size.exceeds(config.max_size):
            return FileInspection.failed(
                MessageKeys.BASE64_FILE_INVALID_SIZE,
                format_actual_size(payload.size_bytes),
                format_limit_size(config.max_size_bytes),
                payload=payload,
            )

        detected_media_type = self._sniffer.detect(payload.raw_bytes)

        if not config.allows(detected_media_type):
            logger.warning(
                f"The detected media type ({detected_media_type}) is not allowed. "
                f"Expected types: {config.allowed_media_types_text()}"
            )
            return FileInspection.failed(
                MessageKeys.BASE64_FILE_INVALID_DETECTED_TYPE,
                detected_media_type,
                config.allowed_media_types_text(),
                payload=payload,
            )

        return FileInspection.passed(payload, detected_media_type)

    def is_valid(self, value: Optional[str], sink: Optional[ViolationSink] = None) -> bool:
        """Validate one encoded file, reporting at most one violation."""
        inspection = self.inspect(value)
        if not inspection.valid:
            self._reporter.report(sink, inspection.message_key, *inspection.message_args)
        return inspection.valid

    def describe(self, inspection: FileInspection, sink: Optional[ViolationSink] = None) -> str:
        """Resolve a failed inspection's message without reporting it."""
        return self._reporter.render(sink, inspection.message_key, *inspection.message_args)


# Factory function for dependency injection
def create_base64_file_validator(
    options: Optional[FileValidationOptions] = None,
    sniffer: Optional[ContentSniffer] = None,
    resolver: Optional[MessageResolver] = None,
) -> Base64FileValidator:
    """Create and initialize base64 file validator."""
    validator = Base64FileValidator(sniffer=sniffer, resolver=resolver)
    validator.initialize(options)
    return validator
