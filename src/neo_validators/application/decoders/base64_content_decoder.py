"""Base64 content decoder.

ONLY data URI decoding - parses ``data:<type>/<subtype>;base64,<payload>``
values, decodes the payload and exposes the decoded bytes together with
the media type the client declared.

The wire format is strict: a value must fully match the data URI pattern.
Padding of the payload is optional; missing ``=`` characters are restored
before decoding, any other alphabet or padding error is rejected.

Following maximum separation architecture - one file = one purpose.
"""

import base64
import binascii
import logging
import re
from typing import Optional

from ...core.exceptions import InvalidEncodedContentError, MalformedEncodedFileError
from ...core.value_objects import DecodedPayload

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r"data:[a-zA-Z0-9.+-]+/[a-zA-Z0-9.+-]+;base64,.*")
DATA_URI_PREFIX = "data:"


def decode_payload(payload: str) -> bytes:
    """Decode a base64 payload, tolerating missing padding.

    Raises:
        InvalidEncodedContentError: If the payload is not valid base64
    """
    try:
        padded = payload + "=" * (-len(payload) % 4)
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodedContentError(
            "Invalid base64 content",
            details={"reason": str(e)},
        ) from e


class Base64ContentDecoder:
    """Decoder for data URI encoded files."""

    def matches(self, value: Optional[str]) -> bool:
        """Check whether a value follows the data URI wire format."""
        return isinstance(value, str) and DATA_URI_PATTERN.fullmatch(value) is not None

    def decode(self, value: str) -> DecodedPayload:
        """Decode a data URI value.

        Args:
            value: Encoded file such as ``data:application/pdf;base64,JVBERi0...``

        Returns:
            DecodedPayload with the declared media type and decoded bytes

        Raises:
            MalformedEncodedFileError: If the value is not a data URI
            InvalidEncodedContentError: If the payload is not valid base64
        """
        if not self.matches(value):
            raise MalformedEncodedFileError("Value is not a base64 data URI")

        header, payload = value.split(",", 1)
        declared_media_type = header[len(DATA_URI_PREFIX):header.index(";")]
        raw_bytes = decode_payload(payload)

        logger.debug(f"Decoded {len(raw_bytes)} bytes declared as {declared_media_type}")
        return DecodedPayload(declared_media_type=declared_media_type, raw_bytes=raw_bytes)

    def decoded_size(self, value: Optional[str]) -> int:
        """Size in bytes of the payload after the first comma, 0 if it cannot be decoded."""
        if not isinstance(value, str) or not value:
            return 0
        payload = value[value.find(",") + 1:]
        try:
            return len(decode_payload(payload))
        except InvalidEncodedContentError as e:
            logger.debug(f"Could not measure encoded value: {e.message}")
            return 0


def create_base64_content_decoder() -> Base64ContentDecoder:
    """Create base64 content decoder."""
    return Base64ContentDecoder()
