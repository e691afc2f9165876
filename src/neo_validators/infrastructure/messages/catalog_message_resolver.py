"""Catalog message resolver.

ONLY message resolution - MessageResolver backed by in-memory catalogs of
``{0}``-style templates, one catalog per locale.

Locale lookup falls back from the exact locale (``pt_BR``, ``pt-BR``) to
the first catalog of the same language (``pt``), then to the default
locale. A key missing from every candidate resolves to the key itself.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ...config.settings import get_settings
from .catalogs import MESSAGE_CATALOGS

logger = logging.getLogger(__name__)


def normalize_locale(locale: Optional[str]) -> Optional[str]:
    """Normalize ``pt-br`` / ``pt_BR`` style identifiers to ``pt_BR``."""
    if not locale:
        return None
    parts = locale.replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) > 1 and parts[1]:
        return f"{language}_{parts[1].upper()}"
    return language


class CatalogMessageResolver:
    """Resolves message keys from bundled locale catalogs."""

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, str]]] = None,
        default_locale: Optional[str] = None,
    ):
        self._catalogs: Dict[str, Mapping[str, str]] = {
            normalize_locale(locale): messages
            for locale, messages in (catalogs or MESSAGE_CATALOGS).items()
        }
        self._default_locale = normalize_locale(default_locale or get_settings().default_locale)

    @property
    def locales(self):
        return tuple(self._catalogs)

    def _catalog_for(self, locale: Optional[str]) -> Optional[Mapping[str, str]]:
        locale = normalize_locale(locale)
        if locale in self._catalogs:
            return self._catalogs[locale]
        if locale:
            language = locale.split("_")[0]
            for candidate, messages in self._catalogs.items():
                if candidate.split("_")[0] == language:
                    return messages
        return self._catalogs.get(self._default_locale)

    def resolve(self, key: str, locale: Optional[str], *args: Any) -> str:
        template = None
        catalog = self._catalog_for(locale)
        if catalog is not None:
            template = catalog.get(key)
        if template is None:
            template = self._catalogs.get(self._default_locale, {}).get(key)
        if template is None:
            logger.warning(f"No message found for key {key} (locale {locale})")
            return key

        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning(f"Could not format message {key} with {len(args)} arguments: {e}")
            return template


# Factory function for dependency injection
def create_catalog_message_resolver(default_locale: Optional[str] = None) -> CatalogMessageResolver:
    """Create catalog message resolver."""
    return CatalogMessageResolver(default_locale=default_locale)
