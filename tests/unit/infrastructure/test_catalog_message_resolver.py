"""Tests for CatalogMessageResolver and the bundled catalogs."""

import pytest

from neo_validators.config.constants import MessageKeys
from neo_validators.infrastructure.messages import (
    EN_US_MESSAGES,
    PT_BR_MESSAGES,
    CatalogMessageResolver,
    normalize_locale,
)


def all_message_keys():
    return [
        value
        for name, value in vars(MessageKeys).items()
        if not name.startswith("_") and isinstance(value, str)
    ]


@pytest.mark.parametrize(
    "raw,expected",
    [("pt-br", "pt_BR"), ("pt_BR", "pt_BR"), ("EN", "en"), (None, None), ("", None)],
)
def test_normalize_locale(raw, expected):
    assert normalize_locale(raw) == expected


@pytest.mark.parametrize("catalog", [EN_US_MESSAGES, PT_BR_MESSAGES], ids=["en_US", "pt_BR"])
def test_catalog_covers_every_key(catalog):
    missing = [key for key in all_message_keys() if key not in catalog]
    assert missing == []


class TestCatalogMessageResolver:
    """Test CatalogMessageResolver."""

    def test_formats_positional_arguments(self, resolver):
        assert resolver.resolve(MessageKeys.BASE64_FILE_MAX_FILE_COUNT, "en_US", 3) == (
            "The maximum number of files allowed is 3."
        )

    @pytest.mark.parametrize("locale", ["pt_BR", "pt-br", "pt"])
    def test_portuguese_variants(self, resolver, locale):
        assert resolver.resolve(MessageKeys.BASE64_FILE_MAX_FILE_COUNT, locale, 3) == (
            "O número máximo de arquivos permitido é 3."
        )

    @pytest.mark.parametrize("locale", ["fr_FR", None])
    def test_unknown_locale_uses_default(self, resolver, locale):
        assert resolver.resolve(MessageKeys.CPF_INVALID_CHECK_DIGIT, locale) == (
            "Invalid CPF: the check digits do not match."
        )

    def test_pt_br_default_locale(self):
        resolver = CatalogMessageResolver(default_locale="pt-BR")
        assert resolver.resolve(MessageKeys.CPF_INVALID_CHECK_DIGIT, None) == (
            "CPF inválido: os dígitos verificadores não conferem."
        )

    def test_unknown_key_resolves_to_itself(self, resolver):
        assert resolver.resolve("validation.unknown", "en_US") == "validation.unknown"

    def test_key_missing_from_locale_falls_back_to_default(self):
        resolver = CatalogMessageResolver(
            catalogs={"en_US": {"greeting": "Hello {0}"}, "pt_BR": {}},
            default_locale="en_US",
        )
        assert resolver.resolve("greeting", "pt_BR", "Ana") == "Hello Ana"

    def test_missing_arguments_return_template(self, resolver):
        assert resolver.resolve(MessageKeys.BASE64_FILE_INVALID_LIST, "en_US") == (
            "Invalid file at position {0}: {1}"
        )

    def test_locales(self, resolver):
        assert set(resolver.locales) == {"en_US", "pt_BR"}
