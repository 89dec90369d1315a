"""
Naming encoders, the field walker and the default resolver registry.
"""

from .encoders import (
    ENCODERS,
    EncoderFunc,
    camel_case_encoder,
    get_encoder,
    lower_encoder,
    underscore_case_encoder,
    upper_encoder,
)
from .registry import get_default_encoder, init_encoder, names_to_set, new_encoder, slice_with_tag
from .resolver import TagEncoder

__all__ = [
    "ENCODERS",
    "EncoderFunc",
    "TagEncoder",
    "camel_case_encoder",
    "get_default_encoder",
    "get_encoder",
    "init_encoder",
    "lower_encoder",
    "names_to_set",
    "new_encoder",
    "slice_with_tag",
    "underscore_case_encoder",
    "upper_encoder",
]
