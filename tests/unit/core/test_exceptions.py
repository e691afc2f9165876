"""Tests for neo-validators exceptions."""

from neo_validators.core.exceptions import (
    AccessorError,
    ConfigurationError,
    EncodedFileError,
    FieldAccessError,
    MalformedEncodedFileError,
    NeoValidatorsError,
    UnsupportedTemporalTypeError,
)


def test_error_code_defaults_to_class_name():
    error = ConfigurationError("not initialized")
    assert error.error_code == "ConfigurationError"
    assert error.details == {}
    assert str(error) == "not initialized"


def test_decoder_errors_share_base():
    assert issubclass(MalformedEncodedFileError, EncodedFileError)
    assert issubclass(EncodedFileError, NeoValidatorsError)


def test_accessor_error_details():
    error = AccessorError("code", "Priority", RuntimeError("boom"))
    assert error.accessor_name == "code"
    assert error.enum_name == "Priority"
    assert error.details["cause"] == "RuntimeError('boom')"


def test_unsupported_temporal_type_names_the_type():
    assert UnsupportedTemporalTypeError("2024-01-01").type_name == "str"



def test_field_access_error_details():
    error = FieldAccessError("start", "Window")
    assert error.message == "Window has no field 'start'"
    assert error.details == {"field_name": "start", "target_type": "Window"}
