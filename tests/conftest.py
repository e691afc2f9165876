"""Pytest configuration and fixtures for neo-validators tests."""

import base64
import io

import pytest

from neo_validators.config.settings import ValidatorSettings
from neo_validators.core.value_objects import FileValidationOptions
from neo_validators.infrastructure.messages import CatalogMessageResolver
from neo_validators.infrastructure.sinks import ViolationCollector

PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x01\x00`\x00`\x00\x00\xff\xdb\x00C\x00P"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
TEXT_BYTES = b"plain text content\n"


class FakeContentSniffer:
    """Signature based sniffer covering the formats used in tests."""

    SIGNATURES = (
        (b"%PDF", "application/pdf"),
        (b"\xff\xd8\xff", "image/jpeg"),
        (b"\x89PNG", "image/png"),
        (b"PK\x03\x04", "application/zip"),
    )

    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.calls = 0

    def detect(self, data: bytes) -> str:
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        if not data:
            return "application/x-empty"
        for signature, media_type in self.SIGNATURES:
            if data.startswith(signature):
                return media_type
        return "text/plain"

    def detect_stream(self, stream) -> str:
        position = stream.tell()
        try:
            header = stream.read(2048)
        finally:
            stream.seek(position)
        return self.detect(header)


def encode_data_uri(media_type: str, data: bytes) -> str:
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def settings():
    """Settings with library defaults, independent of the environment."""
    return ValidatorSettings(
        default_max_size_mb=2,
        default_max_file_count=5,
        default_max_total_size_mb=10,
        reference_time_zone="UTC",
        default_locale="en_US",
        sniff_header_bytes=2048,
    )


@pytest.fixture
def resolver():
    return CatalogMessageResolver(default_locale="en_US")


@pytest.fixture
def sniffer():
    return FakeContentSniffer()


@pytest.fixture
def collector():
    return ViolationCollector(locale="en_US")


@pytest.fixture
def options():
    """File options allowing PDF and JPEG, 3 files, 1 MB each, 2 MB in total."""
    return FileValidationOptions(
        allowed_media_types=("application/pdf", "image/jpeg"),
        max_size_mb=1,
        max_file_count=3,
        max_total_size_mb=2,
    )


@pytest.fixture
def pdf_uri():
    return encode_data_uri("application/pdf", PDF_BYTES)


@pytest.fixture
def jpeg_uri():
    return encode_data_uri("image/jpeg", JPEG_BYTES)


@pytest.fixture
def png_uri():
    return encode_data_uri("image/png", PNG_BYTES)


@pytest.fixture
def text_uri():
    return encode_data_uri("text/plain", TEXT_BYTES)


@pytest.fixture
def data_uri():
    """Factory building data URIs from raw bytes."""
    return encode_data_uri


@pytest.fixture
def make_upload():
    """Factory building FastAPI uploads from raw bytes."""
    from fastapi import UploadFile
    from fastapi.datastructures import Headers

    def _make(filename, data, content_type="application/octet-stream", size="auto"):
        return UploadFile(
            file=io.BytesIO(data),
            size=len(data) if size == "auto" else size,
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    return _make
