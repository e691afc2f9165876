"""Base64 image validator.

ONLY encoded image format validation - checks that a value is an
``image/*`` data URI whose payload decodes. No size or sniffing policy.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import re
from typing import Optional

from ...config.constants import MessageKeys
from ...core.exceptions import InvalidEncodedContentError
from ...core.protocols import MessageResolver, ViolationSink
from ..decoders.base64_content_decoder import decode_payload
from ..helpers.violation_helper import ViolationReporter

logger = logging.getLogger(__name__)

IMAGE_DATA_URI_PATTERN = re.compile(r"data:image/[a-zA-Z]+;base64,.*")


class Base64ImageValidator:
    """Validator for ``data:image/<type>;base64,<payload>`` values."""

    def __init__(self, resolver: Optional[MessageResolver] = None):
        self._reporter = ViolationReporter(resolver)

    def initialize(self, options: None = None) -> None:
        """Images have no configuration."""

    def is_valid(self, value: Optional[str], sink: Optional[ViolationSink] = None) -> bool:
        if not value:
            return True

        if not isinstance(value, str) or not IMAGE_DATA_URI_PATTERN.fullmatch(value):
            self._reporter.report(sink, MessageKeys.BASE64_IMAGE_INVALID_FORMAT)
            return False

        try:
            decode_payload(value.split(",", 1)[1])
        except InvalidEncodedContentError as e:
            logger.debug(f"Invalid base64 image content: {e.details.get('reason')}")
            self._reporter.report(sink, MessageKeys.BASE64_IMAGE_INVALID_CONTENT)
            return False
        return True


def create_base64_image_validator(resolver: Optional[MessageResolver] = None) -> Base64ImageValidator:
    """Create base64 image validator."""
    validator = Base64ImageValidator(resolver)
    validator.initialize()
    return validator
