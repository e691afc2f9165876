"""Violation sink protocol.

ONLY violation reporting contract - the per-call channel a validator uses
to report its (at most one) failure message.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class ViolationSink(Protocol):
    """Violation sink protocol.

    ``locale`` selects the language of resolved messages; None falls back
    to the configured default locale.
    """

    locale: Optional[str]

    def disable_default(self) -> None:
        """Suppress the host's default violation message."""
        ...

    def add_violation(self, message: str, field_path: Optional[str] = None) -> None:
        """Record a resolved violation message, optionally bound to a field."""
        ...
