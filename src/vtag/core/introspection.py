"""
Record-type descriptions consumed by the field walker.

Two kinds of classes are understood as records: subclasses of
:class:`~vtag.core.record.Record` and ``dataclasses`` dataclasses. Both are
reduced to a :class:`RecordType` so the walker never touches class
internals directly.
"""

from __future__ import annotations

import dataclasses
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from ..errors import UnsupportedKindError
from .fields import DEFAULT_TAG_KEY, EMBEDDED_METADATA, TAGS_METADATA
from .record import Record

_NONE_TYPE = type(None)
_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)

# Ordered so that ``bool`` is matched before ``int``.
_BUILTIN_KINDS = (bool, int, float, complex, str, bytes, bytearray, list, tuple, dict, set, frozenset)


@dataclass(frozen=True)
class FieldInfo:
    name: str
    type: Any
    tags: Mapping[str, str]
    embedded: bool = False

    @property
    def exported(self) -> bool:
        return not self.name.startswith("_")

    def tag(self, key: str = DEFAULT_TAG_KEY) -> str:
        return self.tags.get(key, "")


@dataclass(frozen=True)
class RecordType:
    name: str
    module: str
    fields: Tuple[FieldInfo, ...]
    kind: str = "record"

    @property
    def identity(self) -> str:
        return f"{self.module}.{self.name}"


def is_type_like(obj: Any) -> bool:
    """Return True for classes and typing constructs such as ``Optional[T]``."""
    return isinstance(obj, type) or typing.get_origin(obj) is not None


def type_identity(tp: Any) -> str:
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def _is_plain_class(tp: Any) -> bool:
    # Excludes parametrised generics such as ``list[int]``.
    return isinstance(tp, type) and typing.get_origin(tp) is None


def is_record_type(tp: Any) -> bool:
    if not _is_plain_class(tp):
        return False
    return issubclass(tp, Record) or dataclasses.is_dataclass(tp)


def unwrap_optional(tp: Any) -> Any:
    """
    Strip one level of optional indirection: ``Optional[T]`` becomes ``T``.

    Unions with more than one non-``None`` member are returned unchanged.
    """
    if typing.get_origin(tp) in _UNION_ORIGINS:
        members = [arg for arg in typing.get_args(tp) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return members[0]
    return tp


def strip_optional(tp: Any) -> Any:
    unwrapped = unwrap_optional(tp)
    while unwrapped is not tp:
        tp = unwrapped
        unwrapped = unwrap_optional(tp)
    return tp


def kind_of(tp: Any) -> str:
    """Short, human readable kind name used in error messages."""
    if is_record_type(tp):
        return "record"
    if tp is None or tp is _NONE_TYPE:
        return "none"
    origin = typing.get_origin(tp) or tp
    if origin in _UNION_ORIGINS:
        return "union"
    if isinstance(origin, type):
        for builtin in _BUILTIN_KINDS:
            if issubclass(origin, builtin):
                return builtin.__name__
        return "class"
    if callable(origin):
        return "function"
    return type(tp).__name__


def describe(tp: Any) -> RecordType:
    """
    Build a :class:`RecordType` for a record class.

    Raises :class:`UnsupportedKindError` when ``tp`` is not a record.
    """
    if _is_plain_class(tp) and issubclass(tp, Record):
        return _describe_record(tp)
    if _is_plain_class(tp) and dataclasses.is_dataclass(tp):
        return _describe_dataclass(tp)
    raise UnsupportedKindError(kind_of(tp), tp)


def _describe_record(cls: type[Record]) -> RecordType:
    fields = tuple(
        FieldInfo(
            name=field.require_name(),
            type=field.type,
            tags=dict(field.tags),
            embedded=field.embedded,
        )
        for field in cls._meta.get_fields()
    )
    return RecordType(name=cls.__qualname__, module=cls.__module__, fields=fields)


def _evaluate_annotation(annotation: Any, namespaces: list[dict[str, Any]]) -> Any:
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation
    for namespace in namespaces:
        try:
            return eval(annotation, namespace)  # noqa: S307
        except (NameError, AttributeError, SyntaxError, TypeError):
            continue
    return annotation


def _dataclass_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        pass
    # Resolve field by field so one unresolvable name keeps only its own
    # annotation raw.
    namespaces: list[dict[str, Any]] = []
    seen: set[str] = set()
    for base in cls.__mro__:
        module = sys.modules.get(base.__module__)
        if module is None or base.__module__ in seen or not dataclasses.is_dataclass(base):
            continue
        seen.add(base.__module__)
        namespaces.append(dict(vars(module)))
    return {
        field.name: _evaluate_annotation(field.type, namespaces)
        for field in dataclasses.fields(cls)
    }


def _describe_dataclass(cls: type) -> RecordType:
    hints = _dataclass_hints(cls)
    fields = tuple(
        FieldInfo(
            name=field.name,
            type=hints.get(field.name, field.type),
            tags=dict(field.metadata.get(TAGS_METADATA, {})),
            embedded=bool(field.metadata.get(EMBEDDED_METADATA, False)),
        )
        for field in dataclasses.fields(cls)
    )
    return RecordType(name=cls.__qualname__, module=cls.__module__, fields=fields)
