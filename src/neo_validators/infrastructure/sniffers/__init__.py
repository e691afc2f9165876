"""Content sniffer implementations."""

from .magic_content_sniffer import MagicContentSniffer, create_magic_content_sniffer

__all__ = ["MagicContentSniffer", "create_magic_content_sniffer"]
