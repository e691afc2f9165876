"""Content sniffer protocol.

ONLY content type detection contract - determines a payload's media type
from its content signature rather than from a client-supplied label.

Following maximum separation architecture - one file = one purpose.
"""

from typing import BinaryIO
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class ContentSniffer(Protocol):
    """Content sniffer protocol."""

    def detect(self, data: bytes) -> str:
        """Detect the media type of a byte payload."""
        ...

    def detect_stream(self, stream: BinaryIO) -> str:
        """Detect the media type of a readable binary stream.

        Implementations must leave the stream positioned where they found it.

        Raises:
            OSError: If the stream cannot be read
        """
        ...
