"""In-memory violation sink.

ONLY violation collection - a ViolationSink that keeps reported violations
in a list. One collector is meant for one validation call.

Following maximum separation architecture - one file = one purpose.
"""

from typing import List, Optional, Tuple

from ...core.value_objects import Violation


class ViolationCollector:
    """Collects violations reported by validators."""

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale
        self.default_disabled = False
        self._violations: List[Violation] = []

    def disable_default(self) -> None:
        self.default_disabled = True

    def add_violation(self, message: str, field_path: Optional[str] = None) -> None:
        self._violations.append(Violation(message=message, field_path=field_path))

    @property
    def violations(self) -> Tuple[Violation, ...]:
        return tuple(self._violations)

    @property
    def has_violations(self) -> bool:
        return bool(self._violations)

    @property
    def messages(self) -> List[str]:
        return [violation.message for violation in self._violations]

    @property
    def first(self) -> Optional[Violation]:
        return self._violations[0] if self._violations else None

    def clear(self) -> None:
        self._violations.clear()
        self.default_disabled = False
