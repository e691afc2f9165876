"""Violation reporting helper.

ONLY violation emission - resolves a message key through the message
resolver, in the locale carried by the sink, and reports it. Every
validator reports through one of these so that each failing call yields
exactly one localized violation.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Optional

from ...config.settings import get_settings
from ...core.protocols import MessageResolver, ViolationSink

logger = logging.getLogger(__name__)


class ViolationReporter:
    """Resolves message keys and emits them to a violation sink."""

    def __init__(
        self,
        resolver: Optional[MessageResolver] = None,
        default_locale: Optional[str] = None,
    ):
        """Initialize the reporter.

        Args:
            resolver: Message resolver; the bundled catalogs are used when omitted
            default_locale: Locale used when a sink carries none
        """
        if resolver is None:
            from ...infrastructure.messages.catalog_message_resolver import CatalogMessageResolver
            resolver = CatalogMessageResolver()
        self._resolver = resolver
        self._default_locale = default_locale or get_settings().default_locale

    @property
    def resolver(self) -> MessageResolver:
        return self._resolver

    def locale_of(self, sink: Optional[ViolationSink]) -> str:
        """Locale to resolve messages in for a given sink."""
        return getattr(sink, "locale", None) or self._default_locale

    def render(self, sink: Optional[ViolationSink], key: str, *args: Any) -> str:
        """Resolve a message without emitting it."""
        return self._resolver.resolve(key, self.locale_of(sink), *args)

    def report(
        self,
        sink: Optional[ViolationSink],
        key: str,
        *args: Any,
        field_path: Optional[str] = None,
    ) -> None:
        """Resolve a message and add it to the sink as the call's violation.

        A missing sink is tolerated: the failure is only logged.
        """
        message = self.render(sink, key, *args)
        if sink is None:
            logger.debug(f"Violation without sink: {message}")
            return
        sink.disable_default()
        if field_path:
            sink.add_violation(message, field_path)
        else:
            sink.add_violation(message)
