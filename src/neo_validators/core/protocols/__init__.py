"""Protocols for neo-validators collaborators."""

from .content_sniffer import ContentSniffer
from .message_resolver import MessageResolver
from .violation_sink import ViolationSink

__all__ = [
    "ContentSniffer",
    "MessageResolver",
    "ViolationSink",
]
