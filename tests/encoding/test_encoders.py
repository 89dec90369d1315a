import pytest

from vtag.encoding import (
    ENCODERS,
    camel_case_encoder,
    get_encoder,
    lower_encoder,
    underscore_case_encoder,
    upper_encoder,
)
from vtag.errors import UnknownEncoderError


@pytest.mark.parametrize(
    "encoder, prefix, name, expected",
    [
        (upper_encoder, "", "HelloWorld", "HELLOWORLD"),
        (upper_encoder, "ext", "dd", "ext.DD"),
        (lower_encoder, "", "HelloWorld", "helloworld"),
        (lower_encoder, "a.b", "Name", "a.b.name"),
        (camel_case_encoder, "", "HelloWorld", "helloWorld"),
        (camel_case_encoder, "ext", "DD", "ext.dD"),
        (camel_case_encoder, "", "already", "already"),
        (camel_case_encoder, "", "_Private", "_Private"),
        (underscore_case_encoder, "", "HelloWorld", "hello_world"),
        (underscore_case_encoder, "ext", "DD", "ext.dd"),
    ],
)
def test_encoders(encoder, prefix, name, expected):
    assert encoder({}, prefix, name) == expected


def test_camel_case_encoder_handles_empty_name():
    assert camel_case_encoder({}, "", "") == ""


def test_encoder_registry_lookup():
    assert set(ENCODERS) == {"upper", "lower", "camel", "underscore"}
    assert get_encoder("underscore") is underscore_case_encoder


def test_unknown_encoder_name():
    with pytest.raises(UnknownEncoderError) as excinfo:
        get_encoder("kebab")
    assert "kebab" in str(excinfo.value)
