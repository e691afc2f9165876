"""libmagic content sniffer.

ONLY content type detection - python-magic backed implementation of the
ContentSniffer protocol.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import BinaryIO, Optional

import magic

from ...config.settings import ValidatorSettings, get_settings

logger = logging.getLogger(__name__)


class MagicContentSniffer:
    """Detects media types from content signatures using libmagic."""

    def __init__(self, header_bytes: int = 2048):
        """Initialize sniffer.

        Args:
            header_bytes: Bytes read from a stream to detect its type
        """
        self._header_bytes = header_bytes

    def detect(self, data: bytes) -> str:
        mime_type = magic.from_buffer(data, mime=True)
        logger.debug(f"Detected media type {mime_type} for {len(data)} bytes")
        return mime_type

    def detect_stream(self, stream: BinaryIO) -> str:
        """Detect the media type from the head of a stream, restoring its position."""
        position = stream.tell()
        try:
            header = stream.read(self._header_bytes)
        finally:
            stream.seek(position)
        return self.detect(header)


# Factory function for dependency injection
def create_magic_content_sniffer(settings: Optional[ValidatorSettings] = None) -> MagicContentSniffer:
    """Create libmagic content sniffer."""
    settings = settings or get_settings()
    return MagicContentSniffer(header_bytes=settings.sniff_header_bytes)
