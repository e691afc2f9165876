"""Tests for the data URI decoder."""

import base64

import pytest

from neo_validators.application.decoders import Base64ContentDecoder, decode_payload
from neo_validators.core.exceptions import InvalidEncodedContentError, MalformedEncodedFileError


@pytest.fixture
def decoder():
    return Base64ContentDecoder()


class TestBase64ContentDecoder:
    """Test data URI decoding."""

    def test_decodes_declared_type_and_bytes(self, decoder):
        source = b"%PDF-1.4 sample"
        value = f"data:application/pdf;base64,{base64.b64encode(source).decode()}"
        payload = decoder.decode(value)
        assert payload.declared_media_type == "application/pdf"
        assert payload.raw_bytes == source
        assert payload.size_bytes == len(source)

    def test_media_type_with_symbols(self, decoder):
        value = "data:application/vnd.ms-excel;base64,YWJj"
        assert decoder.decode(value).declared_media_type == "application/vnd.ms-excel"

    @pytest.mark.parametrize(
        "value",
        [
            "YWJj",
            "data:application/pdf,YWJj",
            "data:application/pdf;base32,YWJj",
            "data:pdf;base64,YWJj",
            " data:application/pdf;base64,YWJj",
            "data:application/pdf;base64,YW\nJj",
        ],
    )
    def test_rejects_malformed_values(self, decoder, value):
        with pytest.raises(MalformedEncodedFileError):
            decoder.decode(value)

    def test_rejects_illegal_alphabet(self, decoder):
        with pytest.raises(InvalidEncodedContentError):
            decoder.decode("data:text/plain;base64,YW*j")

    def test_missing_padding_is_restored(self):
        assert decode_payload("YQ") == b"a"
        assert decode_payload("YWI") == b"ab"

    def test_impossible_length_is_rejected(self):
        with pytest.raises(InvalidEncodedContentError):
            decode_payload("YWJjZ")

    def test_payload_is_everything_after_first_comma(self, decoder):
        with pytest.raises(InvalidEncodedContentError):
            decoder.decode("data:text/plain;base64,YWJj,ZGVm")

    def test_decoded_size(self, decoder):
        assert decoder.decoded_size("data:text/plain;base64,YWJj") == 3
        assert decoder.decoded_size("data:text/plain;base64,@@") == 0
        assert decoder.decoded_size(None) == 0
        assert decoder.decoded_size("") == 0
