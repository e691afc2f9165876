"""Message resolver protocol.

ONLY message resolution contract - turns a message key, a locale and
positional arguments into user-facing text. Validators never hardcode
user-facing strings; they go through this interface.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class MessageResolver(Protocol):
    """Message resolver protocol."""

    def resolve(self, key: str, locale: Optional[str], *args: Any) -> str:
        """Resolve a message key to localized text.

        Args:
            key: Message key (see MessageKeys)
            locale: Locale identifier such as ``pt_BR``; None means default
            *args: Positional arguments substituted into the template

        Returns:
            Resolved message
        """
        ...
