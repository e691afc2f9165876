"""Decoders for encoded request content."""

from .base64_content_decoder import (
    DATA_URI_PATTERN,
    Base64ContentDecoder,
    create_base64_content_decoder,
    decode_payload,
)

__all__ = [
    "DATA_URI_PATTERN",
    "Base64ContentDecoder",
    "create_base64_content_decoder",
    "decode_payload",
]
