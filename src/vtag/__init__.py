"""
vtag public package initialization.

Resolve the externally visible field names of tagged records, e.g.::

    from vtag import Field, Record, init_encoder, slice_with_tag, underscore_case_encoder

    class Student(Record):
        Name = Field(str, "name,list,detail")
        HomeRoom = Field(str, ",list")

    init_encoder(underscore_case_encoder)
    slice_with_tag(Student, "", "list")  # ["name", "home_room"]
"""

from .cache import InMemoryCache, NameCache, NoOpCache  # noqa: F401
from .core import (
    DEFAULT_TAG_KEY,
    EXCLUDE_SENTINEL,
    Field,
    FieldInfo,
    Record,
    RecordType,
    describe,
    embedded,
    tagged,
)  # noqa: F401
from .encoding import (
    ENCODERS,
    EncoderFunc,
    TagEncoder,
    camel_case_encoder,
    get_default_encoder,
    get_encoder,
    init_encoder,
    lower_encoder,
    names_to_set,
    new_encoder,
    slice_with_tag,
    underscore_case_encoder,
    upper_encoder,
)  # noqa: F401
from .errors import (
    ConfigurationError,
    FieldError,
    RecordConfigurationError,
    RecordDepthError,
    UnknownEncoderError,
    UnsupportedKindError,
    VtagError,
)  # noqa: F401
from .utils import configure_logging, get_logger, to_underscore_case  # noqa: F401

__all__ = [
    "DEFAULT_TAG_KEY",
    "EXCLUDE_SENTINEL",
    "ENCODERS",
    "ConfigurationError",
    "EncoderFunc",
    "Field",
    "FieldError",
    "FieldInfo",
    "InMemoryCache",
    "NameCache",
    "NoOpCache",
    "Record",
    "RecordConfigurationError",
    "RecordDepthError",
    "RecordType",
    "TagEncoder",
    "UnknownEncoderError",
    "UnsupportedKindError",
    "VtagError",
    "camel_case_encoder",
    "configure_logging",
    "describe",
    "embedded",
    "get_default_encoder",
    "get_encoder",
    "get_logger",
    "init_encoder",
    "lower_encoder",
    "names_to_set",
    "new_encoder",
    "slice_with_tag",
    "tagged",
    "to_underscore_case",
    "underscore_case_encoder",
    "upper_encoder",
]
