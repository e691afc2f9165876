"""Tests for MagicContentSniffer against the real libmagic."""

import io

import pytest

from conftest import PDF_BYTES, PNG_BYTES

pytest.importorskip("magic")

from neo_validators.infrastructure.sniffers import MagicContentSniffer, create_magic_content_sniffer  # noqa: E402


@pytest.fixture
def magic_sniffer(settings):
    return create_magic_content_sniffer(settings)


def test_detects_pdf(magic_sniffer):
    assert magic_sniffer.detect(PDF_BYTES) == "application/pdf"


def test_detects_png(magic_sniffer):
    assert magic_sniffer.detect(PNG_BYTES) == "image/png"


def test_stream_position_is_restored(magic_sniffer):
    stream = io.BytesIO(PDF_BYTES)
    stream.seek(0)
    assert magic_sniffer.detect_stream(stream) == "application/pdf"
    assert stream.tell() == 0


def test_reads_only_header_bytes():
    sniffer = MagicContentSniffer(header_bytes=4)
    stream = io.BytesIO(b"plain text " * 10)
    sniffer.detect_stream(stream)
    assert stream.tell() == 0
