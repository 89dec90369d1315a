"""
Naming-convention encoders.

An encoder receives the field's annotation metadata, the dotted prefix
accumulated so far and the raw attribute name, and returns the external
name. Returning an empty string drops the field.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping

from ..errors import UnknownEncoderError
from ..utils.naming import to_underscore_case

EncoderFunc = Callable[[Mapping[str, str], str, str], str]


def _join(prefix: str, name: str) -> str:
    if prefix:
        return f"{prefix}.{name}"
    return name


def upper_encoder(tags: Mapping[str, str], prefix: str, name: str) -> str:
    return _join(prefix, name.upper())


def lower_encoder(tags: Mapping[str, str], prefix: str, name: str) -> str:
    return _join(prefix, name.lower())


def camel_case_encoder(tags: Mapping[str, str], prefix: str, name: str) -> str:
    if name and "A" <= name[0] <= "Z":
        name = name[0].lower() + name[1:]
    return _join(prefix, name)


def underscore_case_encoder(tags: Mapping[str, str], prefix: str, name: str) -> str:
    return _join(prefix, to_underscore_case(name))


ENCODERS: Dict[str, EncoderFunc] = {
    "upper": upper_encoder,
    "lower": lower_encoder,
    "camel": camel_case_encoder,
    "underscore": underscore_case_encoder,
}


def get_encoder(name: str) -> EncoderFunc:
    try:
        return ENCODERS[name]
    except KeyError:
        raise UnknownEncoderError(name) from None
