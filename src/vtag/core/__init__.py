"""
Core building blocks for vtag records and their descriptions.
"""

from .fields import DEFAULT_TAG_KEY, EXCLUDE_SENTINEL, Field, embedded, tagged
from .introspection import (
    FieldInfo,
    RecordType,
    describe,
    is_record_type,
    kind_of,
    strip_optional,
    type_identity,
    unwrap_optional,
)
from .record import Record, RecordMeta, RecordOptions

__all__ = [
    "DEFAULT_TAG_KEY",
    "EXCLUDE_SENTINEL",
    "Field",
    "FieldInfo",
    "Record",
    "RecordMeta",
    "RecordOptions",
    "RecordType",
    "describe",
    "embedded",
    "is_record_type",
    "kind_of",
    "strip_optional",
    "tagged",
    "type_identity",
    "unwrap_optional",
]
