"""Decoded payload value object.

ONLY decoded payload - the bytes carried by one encoded file together with
the media type its client declared. Created per call, never shared.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field

from .file_size import FileSize


@dataclass(frozen=True)
class DecodedPayload:
    """Bytes and declared media type of one decoded data URI."""

    declared_media_type: str
    raw_bytes: bytes = field(repr=False)

    @property
    def size_bytes(self) -> int:
        return len(self.raw_bytes)

    @property
    def size(self) -> FileSize:
        return FileSize(self.size_bytes)
