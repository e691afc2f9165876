"""Tests for shared validation helpers."""

import logging

from neo_validators.application.helpers import (
    ViolationReporter,
    format_actual_size,
    format_limit_size,
    resolve_positive_bound,
    resolve_validation_config,
)
from neo_validators.config.constants import MessageKeys
from neo_validators.core.value_objects import FileValidationOptions
from neo_validators.infrastructure.sinks import ViolationCollector


class TestBounds:
    """Test bound substitution."""

    def test_positive_bound_is_kept(self):
        assert resolve_positive_bound(3, 5, "max_file_count") == 3

    def test_non_positive_bound_is_replaced_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert resolve_positive_bound(-1, 5, "max_file_count", "ListValidator") == 5
        assert "ListValidator: invalid max_file_count=-1" in caplog.text

    def test_config_from_options(self, settings):
        options = FileValidationOptions(
            allowed_media_types=["image/png", "application/pdf", "image/png"],
            max_size_mb=0,
            max_file_count=4,
            max_total_size_mb=-3,
        )
        config = resolve_validation_config(options, settings)
        assert config.allowed_media_types == ("image/png", "application/pdf")
        assert config.max_size_bytes == 2 * 1024 * 1024
        assert config.max_item_count == 4
        assert config.max_aggregate_size_bytes == 10 * 1024 * 1024

    def test_default_options(self, settings):
        config = resolve_validation_config(None, settings)
        assert "application/pdf" in config.allowed_media_types
        assert config.max_item_count == 5

    def test_single_media_type_string(self, settings):
        options = FileValidationOptions(allowed_media_types="application/pdf")
        config = resolve_validation_config(options, settings)
        assert config.allowed_media_types == ("application/pdf",)


class TestSizeFormatting:
    def test_actual_and_limit_precision(self):
        assert format_actual_size(1536 * 1024) == "1.5000"
        assert format_limit_size(10 * 1024 * 1024) == "10"


class TestViolationReporter:
    """Test violation emission."""

    def test_report_disables_default_and_adds_message(self, resolver):
        sink = ViolationCollector()
        ViolationReporter(resolver, "en_US").report(sink, MessageKeys.BASE64_FILE_MAX_FILE_COUNT, 3)
        assert sink.default_disabled
        assert sink.messages == ["The maximum number of files allowed is 3."]
        assert sink.first.field_path is None

    def test_report_with_field_path(self, resolver):
        sink = ViolationCollector()
        ViolationReporter(resolver, "en_US").report(
            sink, MessageKeys.DATE_RANGE_INVALID, "start", "end", field_path="start"
        )
        assert sink.first.field_path == "start"

    def test_sink_locale_selects_language(self, resolver):
        sink = ViolationCollector(locale="pt_BR")
        ViolationReporter(resolver, "en_US").report(sink, MessageKeys.BASE64_FILE_MAX_FILE_COUNT, 3)
        assert sink.messages == ["O número máximo de arquivos permitido é 3."]

    def test_missing_sink_is_tolerated(self, resolver):
        reporter = ViolationReporter(resolver, "en_US")
        reporter.report(None, MessageKeys.CPF_CNPJ_INVALID)
        assert reporter.render(None, MessageKeys.CPF_CNPJ_INVALID) == "The CPF/CNPJ must contain only numbers."
