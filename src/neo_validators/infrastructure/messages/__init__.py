"""Message resolver implementations and bundled catalogs."""

from .catalog_message_resolver import (
    CatalogMessageResolver,
    create_catalog_message_resolver,
    normalize_locale,
)
from .catalogs import EN_US_MESSAGES, MESSAGE_CATALOGS, PT_BR_MESSAGES

__all__ = [
    "CatalogMessageResolver",
    "create_catalog_message_resolver",
    "normalize_locale",
    "EN_US_MESSAGES",
    "MESSAGE_CATALOGS",
    "PT_BR_MESSAGES",
]
