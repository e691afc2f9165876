"""Base64 collection helper.

ONLY shared collection plumbing for lists and maps of encoded files - owns
the single-item validator the collection delegates to, exposes the count
and aggregate bounds it was initialized with, and measures items.

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from ...core.value_objects import FileSize, FileValidationOptions, ValidationConfig
from ..decoders.base64_content_decoder import Base64ContentDecoder

if TYPE_CHECKING:
    from ..validators.base64_file_validator import Base64FileValidator


class Base64CollectionHelper:
    """Bounds and measurements shared by encoded-file collection validators."""

    def __init__(self, item_validator: "Base64FileValidator", decoder: Optional[Base64ContentDecoder] = None):
        self._item_validator = item_validator
        self._decoder = decoder or Base64ContentDecoder()

    def initialize(self, options: Optional[FileValidationOptions] = None) -> ValidationConfig:
        """Initialize the owned item validator from the collection's options."""
        self._item_validator.initialize(options)
        return self._item_validator.config

    @property
    def item_validator(self) -> "Base64FileValidator":
        return self._item_validator

    @property
    def config(self) -> ValidationConfig:
        return self._item_validator.config

    @property
    def max_item_count(self) -> int:
        return self.config.max_item_count

    def exceeds_item_count(self, count: int) -> bool:
        return count > self.config.max_item_count

    def calculate_size(self, value: Optional[str]) -> int:
        """Decoded size of one item, 0 when blank or undecodable."""
        return self._decoder.decoded_size(value)

    def total_size(self, values: Iterable[Optional[str]]) -> FileSize:
        return FileSize(sum(self.calculate_size(value) for value in values))

    def exceeds_aggregate_size(self, total: FileSize) -> bool:
        return total.exceeds(self.config.max_aggregate_size)
