"""Violation value object.

ONLY violation - one resolved failure message with an optional field path.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Violation:
    """A single validation failure report."""

    message: str
    field_path: Optional[str] = None

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message
