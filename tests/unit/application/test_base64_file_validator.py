"""Tests for single encoded file and image validators."""

import logging

import pytest

from conftest import PDF_BYTES, FakeContentSniffer
from neo_validators.application.validators import Base64FileValidator, Base64ImageValidator
from neo_validators.config.constants import MessageKeys
from neo_validators.core.exceptions import ConfigurationError
from neo_validators.core.value_objects import FileValidationOptions

ONE_MB = 1024 * 1024


@pytest.fixture
def validator(sniffer, resolver, settings, options):
    validator = Base64FileValidator(sniffer=sniffer, resolver=resolver, settings=settings)
    validator.initialize(options)
    return validator


class TestBase64FileValidator:
    """Test Base64FileValidator."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_value_is_valid(self, validator, collector, value):
        assert validator.is_valid(value, collector)
        assert not collector.has_violations

    def test_valid_files(self, validator, collector, pdf_uri, jpeg_uri):
        assert validator.is_valid(pdf_uri, collector)
        assert validator.is_valid(jpeg_uri, collector)
        assert not collector.has_violations

    def test_malformed_value(self, validator, collector):
        assert not validator.is_valid("JVBERi0xLjQ=", collector)
        assert collector.messages == [
            "Invalid file format. Expected data:<type>/<subtype>;base64,<content>."
        ]

    def test_invalid_base64_content(self, validator, collector):
        assert not validator.is_valid("data:application/pdf;base64,JVBER*i0", collector)
        assert collector.messages == ["The file content is not valid Base64."]

    def test_oversized_file(self, validator, collector, data_uri):
        value = data_uri("application/pdf", PDF_BYTES + b"0" * ONE_MB)
        assert not validator.is_valid(value, collector)
        assert collector.messages == [
            "The file size (1.0000 MB) exceeds the maximum allowed size of 1 MB."
        ]

    def test_file_at_limit_is_accepted(self, validator, collector, data_uri):
        value = data_uri("application/pdf", PDF_BYTES + b"0" * (ONE_MB - len(PDF_BYTES)))
        assert validator.is_valid(value, collector)

    def test_detected_type_not_allowed(self, validator, collector, png_uri):
        assert not validator.is_valid(png_uri, collector)
        assert collector.messages == [
            "The detected file type (image/png) is not allowed. "
            "Allowed types: application/pdf, image/jpeg."
        ]

    def test_declared_type_is_ignored(self, validator, collector, data_uri):
        # PNG bytes declared as PDF are still sniffed as PNG
        value = data_uri("application/pdf", b"\x89PNG\r\n\x1a\n")
        assert not validator.is_valid(value, collector)
        assert "image/png" in collector.messages[0]

    def test_empty_allowed_set_allows_any_type(self, sniffer, resolver, settings, png_uri, collector):
        validator = Base64FileValidator(sniffer=sniffer, resolver=resolver, settings=settings)
        validator.initialize(FileValidationOptions(allowed_media_types=()))
        assert validator.is_valid(png_uri, collector)

    def test_sniffer_failure_is_reported_as_general_error(self, resolver, settings, options, pdf_uri, collector, caplog):
        validator = Base64FileValidator(
            sniffer=FakeContentSniffer(fail_with=RuntimeError("libmagic exploded")),
            resolver=resolver,
            settings=settings,
        )
        validator.initialize(options)
        with caplog.at_level(logging.ERROR):
            assert not validator.is_valid(pdf_uri, collector)
        assert collector.messages == [
            "The file could not be validated. Please try again or use a different file."
        ]
        assert "libmagic exploded" in caplog.text

    def test_non_string_value_is_reported_not_raised(self, validator, collector):
        assert not validator.is_valid(12345, collector)
        assert len(collector.violations) == 1

    def test_inspect_does_not_report(self, validator, collector, png_uri, pdf_uri):
        failed = validator.inspect(png_uri)
        assert not failed.valid
        assert failed.message_key == MessageKeys.BASE64_FILE_INVALID_DETECTED_TYPE
        assert failed.message_args == ("image/png", "application/pdf, image/jpeg")

        passed = validator.inspect(pdf_uri)
        assert passed.valid
        assert passed.detected_media_type == "application/pdf"
        assert passed.payload.raw_bytes == PDF_BYTES
        assert not collector.has_violations

    def test_is_idempotent(self, validator, collector, png_uri, pdf_uri):
        assert [validator.is_valid(png_uri, collector) for _ in range(2)] == [False, False]
        assert [validator.is_valid(pdf_uri, collector) for _ in range(2)] == [True, True]
        assert collector.messages[0] == collector.messages[1]

    def test_non_positive_bounds_use_defaults(self, sniffer, resolver, settings, caplog):
        validator = Base64FileValidator(sniffer=sniffer, resolver=resolver, settings=settings)
        with caplog.at_level(logging.WARNING):
            validator.initialize(FileValidationOptions(max_size_mb=0, max_file_count=-1, max_total_size_mb=0))
        assert validator.config.max_size_bytes == 2 * ONE_MB
        assert validator.config.max_item_count == 5
        assert validator.config.max_aggregate_size_bytes == 10 * ONE_MB
        assert caplog.text.count("Base64FileValidator: invalid") == 3

    def test_use_before_initialize(self, sniffer, resolver, pdf_uri):
        validator = Base64FileValidator(sniffer=sniffer, resolver=resolver)
        with pytest.raises(ConfigurationError):
            validator.is_valid(pdf_uri)

    def test_portuguese_messages(self, validator, collector):
        collector.locale = "pt_BR"
        assert not validator.is_valid("invalid", collector)
        assert collector.messages == [
            "Formato de arquivo inválido. Esperado data:<tipo>/<subtipo>;base64,<conteúdo>."
        ]


class TestBase64ImageValidator:
    """Test Base64ImageValidator."""

    @pytest.fixture
    def image_validator(self, resolver):
        validator = Base64ImageValidator(resolver)
        validator.initialize()
        return validator

    def test_valid_image(self, image_validator, collector, png_uri):
        assert image_validator.is_valid(png_uri, collector)
        assert image_validator.is_valid(None, collector)
        assert not collector.has_violations

    @pytest.mark.parametrize(
        "value",
        ["data:application/pdf;base64,JVBERi0=", "data:image/svg+xml;base64,PHN2Zz4=", "iVBORw0KGgo="],
    )
    def test_non_image_format(self, image_validator, collector, value):
        assert not image_validator.is_valid(value, collector)
        assert collector.messages == [
            "Invalid image format. Expected data:image/<type>;base64,<content>."
        ]

    def test_invalid_image_content(self, image_validator, collector):
        assert not image_validator.is_valid("data:image/png;base64,iVBOR$w0", collector)
        assert collector.messages == ["The image content is not valid Base64."]
